"""Repository for the users feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dmp_service.core.database import BaseRepository, EqualityFilter, SearchFilter, apply_filters
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.users.models import User

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self) -> None:
        super().__init__(User)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        affiliation_id: int | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[User]:
        """Search users by name or email, optionally within one affiliation.

        Default order: surName ASC.
        """
        stmt = apply_filters(
            select(User),
            SearchFilter([User.given_name, User.sur_name, User.email], term),
            EqualityFilter(User.affiliation_id, affiliation_id),
        )
        query = PaginatedQuery.for_model(
            stmt,
            User,
            default="surName",
            sortable={
                "givenName": User.given_name,
                "surName": User.sur_name,
                "email": User.email,
                "created": User.created_at,
            },
        )
        return await self.paginate(session, query, options)


# Factory function for dependency injection
_user_repository: UserRepository | None = None


def get_user_repository() -> UserRepository:
    """Get UserRepository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = UserRepository()
    return _user_repository
