from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_projects.domain.entities import LoadMode, RepoGroup
from portfolio_projects.domain.exceptions import GitHubRateLimitError
from portfolio_projects.interface.app import create_app
from portfolio_projects.interface.dependencies import get_page_cache
from portfolio_projects.services.load_repositories import LoadRepositoriesUseCase
from portfolio_projects.services.page_cache import ProjectsPageCache

from conftest import FakeFetcher, entry


@pytest.fixture
def dev_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    with TestClient(create_app()) as client:
        yield client


def _client_with(loader: LoadRepositoriesUseCase) -> TestClient:
    app = create_app()
    cache = ProjectsPageCache(loader, LoadMode.PRODUCTION, revalidate_seconds=3600)
    app.dependency_overrides[get_page_cache] = lambda: cache
    return TestClient(app)


def test_health(dev_client):
    assert dev_client.get("/health").json() == {"status": "ok"}


def test_projects_in_development_mode(dev_client):
    resp = dev_client.get("/projects")

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "s-maxage=86400, stale-while-revalidate"
    body = resp.json()
    assert body["revalidate_seconds"] == 86400
    assert [s["group"] for s in body["sections"]] == ["personal", "oss"]
    stocks = body["sections"][0]["cards"][0]
    assert stocks == {
        "title": "stocks",
        "description": "A stock market simulator",
        "stars": 42069,
        "language": "TypeScript",
        "language_icon": "si-typescript",
        "link": "https://stocks.jumr.dev",
        "repo_url": "https://github.com/juliusmarminge/stocks",
        "preview_image": "/images/stocks.png",
        "status": "In Progress",
    }
    assert body["sections"][1]["cards"] == []


def test_preview_images_are_served(dev_client):
    resp = dev_client.get("/images/trpc.png")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"


def test_projects_from_github(small_catalog, valid_responses):
    valid_responses["me/beta"] = {"message": "Not Found"}
    loader = LoadRepositoriesUseCase(FakeFetcher(valid_responses), catalog=small_catalog)

    with _client_with(loader) as client:
        body = client.get("/projects").json()

    personal, oss = body["sections"]
    assert [c["title"] for c in personal["cards"]] == ["alpha", "gamma"]
    assert [c["title"] for c in oss["cards"]] == ["trpc"]
    assert personal["cards"][0]["status"] == "In Progress"


def test_rate_limited_repositories_are_skipped_not_surfaced(small_catalog, valid_responses):
    valid_responses["me/alpha"] = GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")
    valid_responses["trpc/trpc"] = GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")
    loader = LoadRepositoriesUseCase(FakeFetcher(valid_responses), catalog=small_catalog)

    with _client_with(loader) as client:
        resp = client.get("/projects")

    assert resp.status_code == 200
    personal, oss = resp.json()["sections"]
    assert [c["title"] for c in personal["cards"]] == ["beta", "gamma"]
    assert oss["cards"] == []


def test_missing_preview_binding_fails_the_page(valid_responses):
    catalog = {RepoGroup.PERSONAL: (entry("me/alpha", ""),), RepoGroup.OSS: ()}
    loader = LoadRepositoriesUseCase(FakeFetcher(valid_responses), catalog=catalog)

    with _client_with(loader) as client:
        resp = client.get("/projects")

    assert resp.status_code == 500
    assert resp.json() == {
        "status": "error",
        "message": "Add a preview image for repo me/alpha",
    }


def test_startup_fails_when_bundled_image_is_missing(monkeypatch, tmp_path):
    monkeypatch.setenv("ASSETS_DIR", str(tmp_path))
    with pytest.raises(Exception, match="Add a preview image"):
        with TestClient(create_app()):
            pass
