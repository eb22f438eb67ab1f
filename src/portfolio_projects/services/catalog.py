"""Static project catalog: which repositories appear on the page, and how.

The identifier list and the preview-image bindings live in one table so the
two cannot drift apart.  :func:`validate_catalog` runs at start-up and turns
a missing binding into a boot failure instead of a broken card.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from portfolio_projects.domain.entities import ProjectEntry, RepoGroup, RepoStatus
from portfolio_projects.domain.exceptions import (
    InvalidRepoIdentifierError,
    MissingPreviewBindingError,
)
from portfolio_projects.domain.value_objects import RepoIdentifier

logger = logging.getLogger(__name__)

Catalog = Mapping[RepoGroup, tuple[ProjectEntry, ...]]


def _entry(name: str, preview_image: str, status: RepoStatus | None = None) -> ProjectEntry:
    return ProjectEntry(
        identifier=RepoIdentifier.from_string(name),
        preview_image=preview_image,
        status=status,
    )


PROJECT_CATALOG: Catalog = MappingProxyType(
    {
        RepoGroup.PERSONAL: (
            _entry("juliusmarminge/stocks", "stocks.png", RepoStatus.IN_PROGRESS),
            _entry("t3-oss/create-t3-turbo", "ct3t.png"),
            _entry("juliusmarminge/pathfinding-visualizer", "pfv.png"),
            _entry("juliusmarminge/sorting-visualizer", "sv.png"),
        ),
        RepoGroup.OSS: (
            _entry("t3-oss/create-t3-app", "ct3a.png"),
            _entry("trpc/trpc", "trpc.png"),
        ),
    }
)

GROUP_HEADINGS: Mapping[RepoGroup, tuple[str, str]] = MappingProxyType(
    {
        RepoGroup.PERSONAL: (
            "Personal",
            "These are some projects that I have built on my spare time as hobby projects.",
        ),
        RepoGroup.OSS: (
            "Open Source",
            "These are some Open Source projects I often contribute to. Some I even maintain.",
        ),
    }
)


def validate_catalog(catalog: Catalog, assets_dir: Path | None = None) -> None:
    """Fail fast on duplicated identifiers or missing preview bindings.

    When *assets_dir* is given, every bound image must also exist on disk.
    """
    seen: set[str] = set()
    missing: list[str] = []

    for group, entries in catalog.items():
        for entry in entries:
            key = entry.identifier.full_name.lower()
            if key in seen:
                raise InvalidRepoIdentifierError(
                    f"Repository {entry.identifier} is listed more than once in the catalog."
                )
            seen.add(key)

            if not entry.preview_image:
                missing.append(str(entry.identifier))
            elif assets_dir is not None and not (assets_dir / entry.preview_image).is_file():
                missing.append(f"{entry.identifier} ({assets_dir / entry.preview_image})")

        logger.debug("Catalog group %s: %d entries", group.value, len(entries))

    if missing:
        raise MissingPreviewBindingError(
            "Add a preview image for repo(s): " + ", ".join(missing)
        )


def preview_for(full_name: str, catalog: Catalog = PROJECT_CATALOG) -> ProjectEntry:
    """Return the catalog entry for *full_name* (case-insensitive)."""
    wanted = full_name.lower()
    for entries in catalog.values():
        for entry in entries:
            if entry.identifier.full_name.lower() == wanted and entry.preview_image:
                return entry
    raise MissingPreviewBindingError(f"Add a preview image for repo {full_name}")
