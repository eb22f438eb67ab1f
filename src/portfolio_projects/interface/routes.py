"""API routes — thin controllers that delegate to the page cache."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from portfolio_projects.interface.dependencies import get_page_cache
from portfolio_projects.interface.schemas import ProjectsPageResponse
from portfolio_projects.services.page_cache import ProjectsPageCache

router = APIRouter()


@router.get(
    "/projects",
    response_model=ProjectsPageResponse,
    responses={
        500: {"description": "A listed repository has no preview image"},
    },
)
async def projects(
    response: Response,
    cache: ProjectsPageCache = Depends(get_page_cache),
) -> ProjectsPageResponse:
    """Return the Projects page: personal and open-source repository cards."""
    page = await cache.get()
    response.headers["Cache-Control"] = (
        f"s-maxage={cache.revalidate_seconds}, stale-while-revalidate"
    )
    return ProjectsPageResponse.from_page(page, cache.revalidate_seconds)
