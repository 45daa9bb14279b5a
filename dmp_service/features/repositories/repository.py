"""Repository for the repositories feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from dmp_service.core.associations import AssociationError
from dmp_service.core.database import (
    BaseRepository,
    EqualityFilter,
    InvalidFilterError,
    SearchFilter,
    apply_filters,
)
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.repositories.models import (
    OUTPUT_REPOSITORIES,
    Repository,
    RepositoryType,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class RepositoryRepository(BaseRepository[Repository]):
    """Repository for the data Repository model."""

    def __init__(self) -> None:
        super().__init__(Repository)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        repository_type: str | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[Repository]:
        """Search repositories by name, description or keyword.

        Raises:
            InvalidFilterError: If ``repository_type`` is not a known type.
        """
        if repository_type is not None and repository_type not in RepositoryType.__members__:
            raise InvalidFilterError(
                f"Unknown repository type {repository_type!r}", filter_name="repositoryType"
            )

        stmt = apply_filters(
            select(Repository),
            SearchFilter([Repository.name, Repository.description, Repository.keywords], term),
            EqualityFilter(Repository.repository_type, repository_type),
        )
        query = PaginatedQuery.for_model(
            stmt,
            Repository,
            default="name",
            sortable={
                "name": Repository.name,
                "created": Repository.created_at,
                "website": Repository.website,
            },
        )
        return await self.paginate(session, query, options)

    async def add_to_output(self, session: AsyncSession, repository_id: Any, output_id: Any) -> bool:
        """Link a repository to a research output.

        Raises:
            AssociationError: If the repository does not exist.
        """
        if await self.get(session, repository_id) is None:
            raise AssociationError("not found")
        return await OUTPUT_REPOSITORIES.add(session, output_id, repository_id)

    async def remove_from_output(self, session: AsyncSession, repository_id: Any, output_id: Any) -> bool:
        """Unlink a repository from a research output."""
        return await OUTPUT_REPOSITORIES.remove(session, output_id, repository_id)


# Factory function for dependency injection
_repository_repository: RepositoryRepository | None = None


def get_repository_repository() -> RepositoryRepository:
    """Get RepositoryRepository instance."""
    global _repository_repository
    if _repository_repository is None:
        _repository_repository = RepositoryRepository()
    return _repository_repository
