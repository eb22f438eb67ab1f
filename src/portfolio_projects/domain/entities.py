"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from portfolio_projects.domain.value_objects import RepoIdentifier


class LoadMode(str, Enum):
    """Selects between the sample-data bypass and live GitHub fetches."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class RepoGroup(str, Enum):
    """Section of the Projects page a repository is listed under."""

    PERSONAL = "personal"
    OSS = "oss"


class RepoStatus(str, Enum):
    """Optional status tag shown next to a project title."""

    IN_PROGRESS = "In Progress"


@dataclass(frozen=True, slots=True)
class ProjectEntry:
    """One catalog row: which repository to show and how to decorate it."""

    identifier: RepoIdentifier
    preview_image: str
    status: RepoStatus | None = None


@dataclass(frozen=True, slots=True)
class Repository:
    """A validated repository record merged with its catalog decorations."""

    name: str
    full_name: str
    description: str
    html_url: str
    homepage: str | None
    language: str
    stargazers_count: int
    preview_image: str | None = None
    status: RepoStatus | None = None


@dataclass(frozen=True, slots=True)
class ProjectCard:
    """Display descriptor for a single repository card."""

    title: str
    description: str
    stars: int
    language: str
    language_icon: str | None
    link: str
    repo_url: str
    preview_image: str
    status: RepoStatus | None = None


@dataclass(frozen=True, slots=True)
class ProjectSection:
    """A titled group of cards."""

    group: RepoGroup
    title: str
    description: str
    cards: list[ProjectCard] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProjectsPage:
    """The fully built page, as served until the next revalidation."""

    sections: list[ProjectSection]
    generated_at: datetime
