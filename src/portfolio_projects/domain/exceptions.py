"""Domain exception hierarchy.

Per-repository errors are caught by the loader and turn into a skipped record.
Only :class:`MissingPreviewBindingError` is meant to stop a page build.
"""

from __future__ import annotations


class PortfolioError(Exception):
    """Base exception for the entire application."""


# ── Catalog errors ──────────────────────────────────────────────────────────


class InvalidRepoIdentifierError(PortfolioError):
    """The identifier is not of the form ``owner/name`` or is duplicated."""


class MissingPreviewBindingError(PortfolioError):
    """A repository that is about to be rendered has no bundled preview image."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(PortfolioError):
    """The repository does not exist or is not public (404)."""


class RepositoryAccessDeniedError(PortfolioError):
    """Access to the repository was denied (403)."""


class GitHubRateLimitError(PortfolioError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class RepositoryFetchError(PortfolioError):
    """Network failure, timeout, unexpected status or a body that is not JSON."""


# ── Validation errors ───────────────────────────────────────────────────────


class RepoValidationError(PortfolioError):
    """The API payload does not match the expected repository shape."""

    def __init__(self, message: str, payload: object = None) -> None:
        super().__init__(message)
        self.payload = payload
