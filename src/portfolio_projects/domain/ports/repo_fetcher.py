"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from portfolio_projects.domain.value_objects import RepoIdentifier


class RepoFetcher(Protocol):
    """Abstract contract for fetching raw GitHub repository metadata."""

    async def fetch_repository(self, identifier: RepoIdentifier) -> Any:
        """Return the decoded JSON body of ``GET /repos/{owner}/{repo}``."""
        ...
