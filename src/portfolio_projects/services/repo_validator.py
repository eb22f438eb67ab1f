"""Schema for the GitHub ``/repos/{owner}/{repo}`` payload.

Only the fields the Projects page renders are declared; everything else in
the response is ignored.  Validation is strict: a payload with a missing or
wrong-typed field is rejected as a whole, never patched with defaults.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from portfolio_projects.domain.exceptions import RepoValidationError


def is_http_url(value: str | None) -> bool:
    """Return ``True`` for an absolute ``http``/``https`` URL with a host."""
    if not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class RepoPayload(BaseModel):
    """The subset of a GitHub repository response that the page relies on."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    name: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    description: str
    html_url: str
    homepage: str | None = None
    language: str
    stargazers_count: int = Field(ge=0)

    @field_validator("html_url")
    @classmethod
    def _must_be_url(cls, v: str) -> str:
        if not is_http_url(v):
            msg = f"html_url must be an absolute http(s) URL, got '{v}'."
            raise ValueError(msg)
        return v


def validate_payload(payload: Any) -> RepoPayload:
    """Validate a decoded API response, raising :class:`RepoValidationError`."""
    try:
        return RepoPayload.model_validate(payload)
    except ValidationError as exc:
        raise RepoValidationError(str(exc), payload=payload) from exc
