"""Repository for the licenses feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, SearchFilter
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.licenses.models import License

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class LicenseRepository(BaseRepository[License]):
    """Repository for License model."""

    def __init__(self) -> None:
        super().__init__(License)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[License]:
        """Search licenses by name or description.

        Args:
            session: Database session
            term: Case-insensitive substring
            options: Pagination options (default order: name ASC)

        Example:
            page = await repo.search(session, term="creative", options=PaginationOptions(limit=5))
        """
        stmt = SearchFilter([License.name, License.description], term).apply(select(License))
        query = PaginatedQuery.for_model(
            stmt,
            License,
            default="name",
            sortable={
                "name": License.name,
                "created": License.created_at,
                "recommended": License.recommended,
            },
        )
        page = await self.paginate(session, query, options)

        self._lazy.debug(lambda: f"db.search(term={term!r}) -> {page.total_count} matches")
        return page

    async def list_recommended(self, session: AsyncSession, *, recommended: bool = True) -> Sequence[License]:
        """Licenses by recommended flag, ordered by name."""
        stmt = select(License).where(License.recommended.is_(recommended)).order_by(License.name)
        result = await session.execute(stmt)
        return result.scalars().all()


# Factory function for dependency injection
_license_repository: LicenseRepository | None = None


def get_license_repository() -> LicenseRepository:
    """Get LicenseRepository instance."""
    global _license_repository
    if _license_repository is None:
        _license_repository = LicenseRepository()
    return _license_repository
