"""Repositories for the contributors feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dmp_service.core.associations import AssociationError
from dmp_service.core.database import BaseRepository
from dmp_service.features.contributors.models import (
    CONTRIBUTOR_ROLES,
    ContributorRole,
    ProjectContributor,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.ext.asyncio import AsyncSession


class ContributorRoleRepository(BaseRepository[ContributorRole]):
    """Repository for ContributorRole model.

    Owns the per-id link operations between roles and project contributors.
    """

    def __init__(self) -> None:
        super().__init__(ContributorRole)

    async def labels(self, session: AsyncSession, role_ids: Iterable[Any]) -> dict[Any, str]:
        """Role labels keyed by id, for warning messages."""
        return {role.id: role.label for role in await self.get_many(session, role_ids)}

    async def role_ids_for_contributor(self, session: AsyncSession, contributor_id: Any) -> list[Any]:
        """Ids of the roles currently assigned to a contributor."""
        return await CONTRIBUTOR_ROLES.current_ids(session, contributor_id)

    async def add_to_contributor(self, session: AsyncSession, role_id: Any, contributor_id: Any) -> bool:
        """Assign a role to a project contributor.

        Raises:
            AssociationError: If the role does not exist.
        """
        if await self.get(session, role_id) is None:
            raise AssociationError("not found")
        return await CONTRIBUTOR_ROLES.add(session, contributor_id, role_id)

    async def remove_from_contributor(self, session: AsyncSession, role_id: Any, contributor_id: Any) -> bool:
        """Remove a role from a project contributor."""
        return await CONTRIBUTOR_ROLES.remove(session, contributor_id, role_id)


class ProjectContributorRepository(BaseRepository[ProjectContributor]):
    """Repository for ProjectContributor model."""

    def __init__(self) -> None:
        super().__init__(ProjectContributor)


# Factory functions for dependency injection
_contributor_role_repository: ContributorRoleRepository | None = None
_project_contributor_repository: ProjectContributorRepository | None = None


def get_contributor_role_repository() -> ContributorRoleRepository:
    """Get ContributorRoleRepository instance."""
    global _contributor_role_repository
    if _contributor_role_repository is None:
        _contributor_role_repository = ContributorRoleRepository()
    return _contributor_role_repository


def get_project_contributor_repository() -> ProjectContributorRepository:
    """Get ProjectContributorRepository instance."""
    global _project_contributor_repository
    if _project_contributor_repository is None:
        _project_contributor_repository = ProjectContributorRepository()
    return _project_contributor_repository
