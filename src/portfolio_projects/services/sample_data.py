"""Hand-authored records served in development instead of hitting GitHub.

Only the GitHub fields live here; preview images and status tags come from
the catalog, the same way they are attached to live records.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from portfolio_projects.domain.entities import RepoGroup, Repository
from portfolio_projects.services.catalog import PROJECT_CATALOG, Catalog, preview_for

SAMPLE_REPOSITORIES: Mapping[RepoGroup, tuple[Repository, ...]] = MappingProxyType(
    {
        RepoGroup.PERSONAL: (
            Repository(
                name="stocks",
                full_name="juliusmarminge/stocks",
                description="A stock market simulator",
                html_url="https://github.com/juliusmarminge/stocks",
                homepage="https://stocks.jumr.dev",
                language="TypeScript",
                stargazers_count=42069,
            ),
            Repository(
                name="pathfinding-visualizer",
                full_name="juliusmarminge/pathfinding-visualizer",
                description="A pathfinding visualizer",
                html_url="https://github.com/juliusmarminge/pathfinding-visualizer",
                homepage="https://pfv.jumr.dev",
                language="TypeScript",
                stargazers_count=19,
            ),
            Repository(
                name="sorting-visualizer",
                full_name="juliusmarminge/sorting-visualizer",
                description="A sorting visualizer",
                html_url="https://github.com/juliusmarminge/sorting-visualizer",
                homepage="https://sv.jumr.dev",
                language="TypeScript",
                stargazers_count=0,
            ),
        ),
        RepoGroup.OSS: (),
    }
)


def sample_repositories(catalog: Catalog = PROJECT_CATALOG) -> dict[RepoGroup, list[Repository]]:
    """Return the development sample set decorated from *catalog*.

    Raises :class:`MissingPreviewBindingError` if a sample has no catalog entry.
    """
    repos: dict[RepoGroup, list[Repository]] = {}
    for group, samples in SAMPLE_REPOSITORIES.items():
        repos[group] = []
        for sample in samples:
            entry = preview_for(sample.full_name, catalog)
            repos[group].append(
                replace(sample, preview_image=entry.preview_image, status=entry.status)
            )
    return repos
