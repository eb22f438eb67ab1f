"""Projection of validated repositories into display-card descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType

from portfolio_projects.domain.entities import (
    ProjectCard,
    ProjectSection,
    ProjectsPage,
    RepoGroup,
    Repository,
)
from portfolio_projects.domain.exceptions import MissingPreviewBindingError
from portfolio_projects.services.catalog import GROUP_HEADINGS
from portfolio_projects.services.repo_validator import is_http_url

# Keyed by lower-cased GitHub language name; values are icon identifiers.
LANGUAGE_ICONS: Mapping[str, str] = MappingProxyType(
    {
        "typescript": "si-typescript",
    }
)

IMAGES_URL_PREFIX = "/images"


def language_icon(language: str) -> str | None:
    """Return the icon for *language*, or ``None`` when there is none."""
    return LANGUAGE_ICONS.get(language.lower())


def link_target(repo: Repository) -> str:
    """Homepage when it is a usable URL, otherwise the repository page."""
    if is_http_url(repo.homepage):
        return repo.homepage  # type: ignore[return-value]
    return repo.html_url


def to_card(repo: Repository) -> ProjectCard:
    """Project a single repository into a card descriptor."""
    if not repo.preview_image:
        raise MissingPreviewBindingError(f"Add a preview image for repo {repo.full_name}")

    return ProjectCard(
        title=repo.name,
        description=repo.description,
        stars=repo.stargazers_count,
        language=repo.language,
        language_icon=language_icon(repo.language),
        link=link_target(repo),
        repo_url=repo.html_url,
        preview_image=f"{IMAGES_URL_PREFIX}/{repo.preview_image}",
        status=repo.status,
    )


def build_page(
    repos: Mapping[RepoGroup, list[Repository]],
    generated_at: datetime | None = None,
) -> ProjectsPage:
    """Build every section in page order.

    All cards are projected before the page is returned, so one missing
    binding fails the whole build.
    """
    sections: list[ProjectSection] = []
    for group in RepoGroup:
        title, description = GROUP_HEADINGS[group]
        sections.append(
            ProjectSection(
                group=group,
                title=title,
                description=description,
                cards=[to_card(repo) for repo in repos.get(group, [])],
            )
        )
    return ProjectsPage(
        sections=sections,
        generated_at=generated_at or datetime.now(timezone.utc),
    )
