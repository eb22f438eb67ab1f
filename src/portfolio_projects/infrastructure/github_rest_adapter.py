"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from portfolio_projects.domain.exceptions import (
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
    RepositoryFetchError,
    RepositoryNotFoundError,
)
from portfolio_projects.domain.value_objects import RepoIdentifier

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "portfolio-projects/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_repository(self, identifier: RepoIdentifier) -> Any:
        """GET /repos/{owner}/{repo} → decoded JSON body."""
        resp = await self._api_get(f"/repos/{identifier.owner}/{identifier.repo}")
        try:
            return resp.json()
        except ValueError as exc:
            raise RepositoryFetchError(
                f"GitHub API returned a non-JSON body for {identifier}: {exc}"
            ) from exc

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{_GITHUB_API}{endpoint}"
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.TimeoutException as exc:
            raise RepositoryFetchError(f"Timed out fetching {url}") from exc
        except httpx.HTTPError as exc:
            raise RepositoryFetchError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"Repository not found: {url}")

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryAccessDeniedError(f"Access denied for {url}.")

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise RepositoryFetchError(f"GitHub API returned HTTP {resp.status_code} for {url}")
