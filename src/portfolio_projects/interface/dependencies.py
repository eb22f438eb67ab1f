"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from portfolio_projects.infrastructure.config import get_settings
from portfolio_projects.infrastructure.github_rest_adapter import GitHubRestAdapter
from portfolio_projects.services.catalog import PROJECT_CATALOG, validate_catalog
from portfolio_projects.services.load_repositories import LoadRepositoriesUseCase
from portfolio_projects.services.page_cache import ProjectsPageCache

_http_client: httpx.AsyncClient | None = None
_page_cache: ProjectsPageCache | None = None


async def startup() -> None:
    """Validate the catalog and initialise shared resources."""
    global _http_client, _page_cache  # noqa: PLW0603

    settings = get_settings()
    validate_catalog(PROJECT_CATALOG, settings.assets_dir)

    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))
    token = settings.github_token.get_secret_value() if settings.github_token else None
    loader = LoadRepositoriesUseCase(
        repo_fetcher=GitHubRestAdapter(client=_http_client, token=token),
        catalog=PROJECT_CATALOG,
        concurrent=settings.concurrent_fetches,
    )
    _page_cache = ProjectsPageCache(
        loader=loader,
        mode=settings.app_env,
        revalidate_seconds=settings.revalidate_seconds,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _page_cache  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _page_cache = None


def get_page_cache() -> ProjectsPageCache:
    """Return the process-wide page cache."""
    assert _page_cache is not None, "startup() was not called"
    return _page_cache
