"""Repository for the sections feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, EqualityFilter, SearchFilter, apply_filters
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.sections.models import Section

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class SectionRepository(BaseRepository[Section]):
    """Repository for Section model."""

    def __init__(self) -> None:
        super().__init__(Section)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        template_id: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[Section]:
        """Search sections by name or introduction, optionally within one template.

        Default order: displayOrder ASC.
        """
        stmt = apply_filters(
            select(Section),
            SearchFilter([Section.name, Section.introduction], term),
            EqualityFilter(Section.template_id, template_id),
        )
        query = PaginatedQuery.for_model(
            stmt,
            Section,
            default="displayOrder",
            sortable={
                "name": Section.name,
                "displayOrder": Section.display_order,
                "created": Section.created_at,
            },
        )
        return await self.paginate(session, query, options)


# Factory function for dependency injection
_section_repository: SectionRepository | None = None


def get_section_repository() -> SectionRepository:
    """Get SectionRepository instance."""
    global _section_repository
    if _section_repository is None:
        _section_repository = SectionRepository()
    return _section_repository
