"""Repository for the research outputs feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, SearchFilter
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.outputs.models import ResearchOutput

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class ResearchOutputRepository(BaseRepository[ResearchOutput]):
    """Repository for ResearchOutput model."""

    def __init__(self) -> None:
        super().__init__(ResearchOutput)

    async def search(
        self,
        session: AsyncSession,
        *,
        project_id: Any,
        term: str | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[ResearchOutput]:
        """Search a project's outputs by title and description."""
        stmt = SearchFilter([ResearchOutput.title, ResearchOutput.description], term).apply(
            select(ResearchOutput).where(ResearchOutput.project_id == project_id)
        )
        query = PaginatedQuery.for_model(
            stmt,
            ResearchOutput,
            default="title",
            sortable={
                "title": ResearchOutput.title,
                "outputType": ResearchOutput.output_type,
                "created": ResearchOutput.created_at,
            },
        )
        return await self.paginate(session, query, options)


# Factory function for dependency injection
_research_output_repository: ResearchOutputRepository | None = None


def get_research_output_repository() -> ResearchOutputRepository:
    """Get ResearchOutputRepository instance."""
    global _research_output_repository
    if _research_output_repository is None:
        _research_output_repository = ResearchOutputRepository()
    return _research_output_repository
