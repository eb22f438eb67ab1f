from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest

from portfolio_projects.domain.entities import ProjectEntry, RepoGroup, RepoStatus
from portfolio_projects.domain.value_objects import RepoIdentifier
from portfolio_projects.infrastructure.config import get_settings

ASSETS_DIR = Path(__file__).resolve().parent.parent / "public" / "images"


def make_payload(full_name: str, **overrides: Any) -> dict[str, Any]:
    """A GitHub-shaped repository payload, with a few irrelevant extras."""
    owner, name = full_name.split("/")
    payload: dict[str, Any] = {
        "id": 1234,
        "name": name,
        "full_name": full_name,
        "owner": {"login": owner},
        "description": f"The {name} project",
        "html_url": f"https://github.com/{full_name}",
        "homepage": f"https://{name}.example.dev",
        "language": "TypeScript",
        "stargazers_count": 10,
        "forks_count": 2,
    }
    payload.update(overrides)
    return payload


class FakeFetcher:
    """In-memory RepoFetcher; values may be payloads or exceptions to raise."""

    def __init__(
        self,
        responses: dict[str, Any],
        delays: dict[str, float] | None = None,
    ) -> None:
        self.responses = responses
        self.delays = delays or {}
        self.calls: list[str] = []

    async def fetch_repository(self, identifier: RepoIdentifier) -> Any:
        key = identifier.full_name
        self.calls.append(key)
        if key in self.delays:
            await asyncio.sleep(self.delays[key])
        value = self.responses[key]
        if isinstance(value, Exception):
            raise value
        return value


def entry(name: str, image: str = "trpc.png", status: RepoStatus | None = None) -> ProjectEntry:
    return ProjectEntry(RepoIdentifier.from_string(name), image, status)


@pytest.fixture
def small_catalog() -> dict[RepoGroup, tuple[ProjectEntry, ...]]:
    return {
        RepoGroup.PERSONAL: (
            entry("me/alpha", "stocks.png", RepoStatus.IN_PROGRESS),
            entry("me/beta", "pfv.png"),
            entry("me/gamma", "sv.png"),
        ),
        RepoGroup.OSS: (
            entry("trpc/trpc", "trpc.png"),
        ),
    }


@pytest.fixture
def valid_responses(small_catalog) -> dict[str, Any]:
    return {
        e.identifier.full_name: make_payload(e.identifier.full_name)
        for entries in small_catalog.values()
        for e in entries
    }


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.setenv("ASSETS_DIR", str(ASSETS_DIR))
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
