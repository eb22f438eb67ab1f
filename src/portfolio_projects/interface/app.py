"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from portfolio_projects.infrastructure.config import get_settings
from portfolio_projects.interface.dependencies import shutdown, startup
from portfolio_projects.interface.error_handlers import register_error_handlers
from portfolio_projects.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Portfolio Projects",
        version="1.0.0",
        description=(
            "Personal and open-source repositories for the portfolio's "
            "Projects page, fetched from GitHub and revalidated daily."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)
    app.mount(
        "/images",
        StaticFiles(directory=settings.assets_dir, check_dir=False),
        name="images",
    )

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
