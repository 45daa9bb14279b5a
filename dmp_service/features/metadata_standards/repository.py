"""Repository for the metadata standards feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from dmp_service.core.associations import AssociationError
from dmp_service.core.database import BaseRepository, SearchFilter
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.metadata_standards.models import (
    OUTPUT_METADATA_STANDARDS,
    MetadataStandard,
    metadata_standard_research_domains,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class MetadataStandardRepository(BaseRepository[MetadataStandard]):
    """Repository for MetadataStandard model."""

    def __init__(self) -> None:
        super().__init__(MetadataStandard)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        research_domain_id: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[MetadataStandard]:
        """Search metadata standards by name, description or keyword.

        ``research_domain_id`` keeps only standards tagged with that domain.
        """
        stmt = SearchFilter(
            [MetadataStandard.name, MetadataStandard.description, MetadataStandard.keywords],
            term,
        ).apply(select(MetadataStandard))
        if research_domain_id is not None:
            link = metadata_standard_research_domains
            stmt = stmt.where(
                MetadataStandard.id.in_(
                    select(link.c.metadata_standard_id).where(
                        link.c.research_domain_id == research_domain_id
                    )
                )
            )

        query = PaginatedQuery.for_model(
            stmt,
            MetadataStandard,
            default="name",
            sortable={"name": MetadataStandard.name, "created": MetadataStandard.created_at},
        )
        return await self.paginate(session, query, options)

    async def add_to_output(self, session: AsyncSession, standard_id: Any, output_id: Any) -> bool:
        """Link a metadata standard to a research output.

        Raises:
            AssociationError: If the metadata standard does not exist.
        """
        if await self.get(session, standard_id) is None:
            raise AssociationError("not found")
        return await OUTPUT_METADATA_STANDARDS.add(session, output_id, standard_id)

    async def remove_from_output(self, session: AsyncSession, standard_id: Any, output_id: Any) -> bool:
        """Unlink a metadata standard from a research output."""
        return await OUTPUT_METADATA_STANDARDS.remove(session, output_id, standard_id)


# Factory function for dependency injection
_metadata_standard_repository: MetadataStandardRepository | None = None


def get_metadata_standard_repository() -> MetadataStandardRepository:
    """Get MetadataStandardRepository instance."""
    global _metadata_standard_repository
    if _metadata_standard_repository is None:
        _metadata_standard_repository = MetadataStandardRepository()
    return _metadata_standard_repository
