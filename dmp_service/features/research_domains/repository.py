"""Repository for the research domains feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, EqualityFilter, SearchFilter, apply_filters
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.research_domains.models import ResearchDomain

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class ResearchDomainRepository(BaseRepository[ResearchDomain]):
    """Repository for ResearchDomain model."""

    def __init__(self) -> None:
        super().__init__(ResearchDomain)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        parent_id: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[ResearchDomain]:
        """Search research domains, optionally only the children of ``parent_id``."""
        stmt = apply_filters(
            select(ResearchDomain),
            SearchFilter([ResearchDomain.name, ResearchDomain.description], term),
            EqualityFilter(ResearchDomain.parent_research_domain_id, parent_id),
        )
        query = PaginatedQuery.for_model(
            stmt,
            ResearchDomain,
            default="name",
            sortable={"name": ResearchDomain.name, "created": ResearchDomain.created_at},
        )
        return await self.paginate(session, query, options)


# Factory function for dependency injection
_research_domain_repository: ResearchDomainRepository | None = None


def get_research_domain_repository() -> ResearchDomainRepository:
    """Get ResearchDomainRepository instance."""
    global _research_domain_repository
    if _research_domain_repository is None:
        _research_domain_repository = ResearchDomainRepository()
    return _research_domain_repository
