"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from portfolio_projects.domain.entities import ProjectCard, ProjectsPage


class ProjectCardResponse(BaseModel):
    """A single repository card."""

    title: str
    description: str
    stars: int
    language: str
    language_icon: str | None = None
    link: str
    repo_url: str
    preview_image: str
    status: str | None = None

    @classmethod
    def from_card(cls, card: ProjectCard) -> ProjectCardResponse:
        return cls(
            title=card.title,
            description=card.description,
            stars=card.stars,
            language=card.language,
            language_icon=card.language_icon,
            link=card.link,
            repo_url=card.repo_url,
            preview_image=card.preview_image,
            status=card.status.value if card.status else None,
        )


class ProjectSectionResponse(BaseModel):
    """A titled group of cards (``personal`` or ``oss``)."""

    group: str
    title: str
    description: str
    cards: list[ProjectCardResponse]


class ProjectsPageResponse(BaseModel):
    """Successful response from ``GET /projects``."""

    sections: list[ProjectSectionResponse]
    generated_at: datetime
    revalidate_seconds: int

    @classmethod
    def from_page(cls, page: ProjectsPage, revalidate_seconds: int) -> ProjectsPageResponse:
        return cls(
            sections=[
                ProjectSectionResponse(
                    group=section.group.value,
                    title=section.title,
                    description=section.description,
                    cards=[ProjectCardResponse.from_card(c) for c in section.cards],
                )
                for section in page.sections
            ],
            generated_at=page.generated_at,
            revalidate_seconds=revalidate_seconds,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
