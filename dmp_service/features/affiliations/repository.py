"""Repository for the affiliations feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, BooleanFilter, SearchFilter, apply_filters
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.affiliations.models import Affiliation

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class AffiliationRepository(BaseRepository[Affiliation]):
    """Repository for Affiliation model."""

    def __init__(self) -> None:
        super().__init__(Affiliation)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        funder_only: bool = False,
        active: bool | None = True,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[Affiliation]:
        """Search affiliations by name, display name or acronym.

        Args:
            session: Database session
            term: Case-insensitive substring
            funder_only: Only return funders
            active: Match on the active flag; None returns both
            options: Pagination options (default order: name ASC)
        """
        stmt = apply_filters(
            select(Affiliation),
            SearchFilter(
                [Affiliation.name, Affiliation.display_name, Affiliation.acronyms], term
            ),
            BooleanFilter(Affiliation.funder, True if funder_only else None),
            BooleanFilter(Affiliation.active, active),
        )
        query = PaginatedQuery.for_model(
            stmt,
            Affiliation,
            default="name",
            sortable={
                "name": Affiliation.name,
                "displayName": Affiliation.display_name,
                "created": Affiliation.created_at,
            },
        )
        page = await self.paginate(session, query, options)

        self._lazy.debug(
            lambda: f"db.search(term={term!r}, funder_only={funder_only}) -> {page.total_count} matches"
        )
        return page


# Factory function for dependency injection
_affiliation_repository: AffiliationRepository | None = None


def get_affiliation_repository() -> AffiliationRepository:
    """Get AffiliationRepository instance."""
    global _affiliation_repository
    if _affiliation_repository is None:
        _affiliation_repository = AffiliationRepository()
    return _affiliation_repository
