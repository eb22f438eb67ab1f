"""Time-based revalidation of the built Projects page.

The page is rebuilt from scratch once it is older than the revalidation
interval; there is no partial update.  A failed rebuild keeps the previous
page in place and re-raises.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from portfolio_projects.domain.entities import LoadMode, ProjectsPage
from portfolio_projects.services.load_repositories import LoadRepositoriesUseCase
from portfolio_projects.services.presentation import build_page

logger = logging.getLogger(__name__)


class ProjectsPageCache:
    """Holds the last built page and rebuilds it when stale."""

    def __init__(
        self,
        loader: LoadRepositoriesUseCase,
        mode: LoadMode,
        revalidate_seconds: int = 86_400,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._loader = loader
        self._mode = mode
        self._revalidate = revalidate_seconds
        self._clock = clock
        self._page: ProjectsPage | None = None
        self._built_at: float | None = None
        self._lock = asyncio.Lock()

    @property
    def revalidate_seconds(self) -> int:
        return self._revalidate

    @property
    def page(self) -> ProjectsPage | None:
        """Last successfully built page, stale or not."""
        return self._page

    def is_stale(self) -> bool:
        if self._page is None or self._built_at is None:
            return True
        return self._clock() - self._built_at >= self._revalidate

    async def get(self) -> ProjectsPage:
        """Return the current page, rebuilding it first if it is stale."""
        async with self._lock:
            if self.is_stale():
                await self._rebuild()
            assert self._page is not None
            return self._page

    def invalidate(self) -> None:
        """Force the next :meth:`get` to rebuild."""
        self._built_at = None

    async def _rebuild(self) -> None:
        logger.info("Regenerating projects page (%s)", self._mode.value)
        repos = await self._loader.execute(self._mode)
        page = build_page(repos)
        self._page = page
        self._built_at = self._clock()
