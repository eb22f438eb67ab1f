"""Load-repositories use case — fetch, validate and decorate catalog entries.

Depends only on the :class:`RepoFetcher` port and the static catalog.  The
interface layer injects the concrete GitHub adapter at runtime.
"""

from __future__ import annotations

import asyncio
import logging

from portfolio_projects.domain.entities import LoadMode, ProjectEntry, RepoGroup, Repository
from portfolio_projects.domain.exceptions import PortfolioError, RepoValidationError
from portfolio_projects.domain.ports.repo_fetcher import RepoFetcher
from portfolio_projects.services.catalog import PROJECT_CATALOG, Catalog
from portfolio_projects.services.repo_validator import validate_payload
from portfolio_projects.services.sample_data import sample_repositories

logger = logging.getLogger(__name__)


class LoadRepositoriesUseCase:
    """Builds the per-group list of validated repositories.

    Parameters
    ----------
    repo_fetcher:
        Adapter that returns the raw GitHub payload for an identifier.
    catalog:
        Ordered identifiers per group, with their preview bindings.
    concurrent:
        Issue all fetches at once instead of one after another.  Output
        order follows the catalog either way.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        catalog: Catalog = PROJECT_CATALOG,
        concurrent: bool = True,
    ) -> None:
        self._fetcher = repo_fetcher
        self._catalog = catalog
        self._concurrent = concurrent

    async def execute(self, mode: LoadMode) -> dict[RepoGroup, list[Repository]]:
        """Return validated repositories grouped as in the catalog."""
        if mode is LoadMode.DEVELOPMENT:
            # Avoids burning the unauthenticated rate limit while iterating locally.
            logger.info("Development mode: serving sample repositories")
            return sample_repositories(self._catalog)

        repos: dict[RepoGroup, list[Repository]] = {}
        for group, entries in self._catalog.items():
            repos[group] = await self._load_group(entries)
            logger.info(
                "Loaded %d/%d %s repositories", len(repos[group]), len(entries), group.value
            )
        return repos

    async def _load_group(self, entries: tuple[ProjectEntry, ...]) -> list[Repository]:
        if self._concurrent:
            results = await asyncio.gather(*(self._load_one(entry) for entry in entries))
        else:
            results = [await self._load_one(entry) for entry in entries]
        return [r for r in results if r is not None]

    async def _load_one(self, entry: ProjectEntry) -> Repository | None:
        """Fetch and validate one entry; any per-repository failure skips it."""
        try:
            payload = await self._fetcher.fetch_repository(entry.identifier)
        except PortfolioError as exc:
            logger.warning("Skipping %s: %s", entry.identifier, exc)
            return None

        try:
            validated = validate_payload(payload)
        except RepoValidationError as exc:
            logger.warning(
                "Skipping %s: invalid response %r\n%s", entry.identifier, exc.payload, exc
            )
            return None

        return Repository(
            **validated.model_dump(),
            preview_image=entry.preview_image,
            status=entry.status,
        )
