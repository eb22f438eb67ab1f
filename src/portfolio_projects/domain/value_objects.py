"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from portfolio_projects.domain.exceptions import InvalidRepoIdentifierError

_IDENTIFIER_RE = re.compile(r"^(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+)$")


@dataclass(frozen=True, slots=True)
class RepoIdentifier:
    """Validated ``owner/name`` repository identifier.

    Parses strings like ``trpc/trpc``.  Rejects anything with a missing
    segment, extra slashes or whitespace inside.
    """

    owner: str
    repo: str

    @classmethod
    def from_string(cls, value: str) -> RepoIdentifier:
        """Parse and validate a raw identifier string."""
        value = value.strip()
        match = _IDENTIFIER_RE.match(value)
        if not match:
            raise InvalidRepoIdentifierError(
                f"Invalid repository identifier: '{value}'. Expected format: <owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.full_name
