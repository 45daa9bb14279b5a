"""Service layer for the contributors feature."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dmp_service.core.associations import (
    AssociationSyncCoordinator,
    MutationResult,
    describe_sync_failures,
)
from dmp_service.features.contributors.models import ProjectContributor
from dmp_service.features.contributors.repository import (
    ContributorRoleRepository,
    ProjectContributorRepository,
    get_contributor_role_repository,
    get_project_contributor_repository,
)
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.associations import SyncOutcome
    from dmp_service.features.contributors.schemas import ContributorCreate, ContributorUpdate


logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

ROLES_FIELD = "contributorRoles"


@dataclass(slots=True, frozen=True)
class ContributorRoleAssociation:
    """A contributor and the role ids currently assigned to it."""

    parent_id: int
    association_ids: tuple[int, ...]


class ContributorService:
    """Service for project contributor operations.

    Role assignment is best effort: the contributor is always saved, and
    roles that could not be assigned or removed are reported under the
    ``contributorRoles`` field of the result.
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: ProjectContributorRepository | None = None,
        roles: ContributorRoleRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_project_contributor_repository()
        self._roles = roles or get_contributor_role_repository()
        self._coordinator = AssociationSyncCoordinator("contributor_roles")

    async def get_contributor(self, contributor_id: int) -> ProjectContributor:
        """Get a contributor by ID.

        Raises:
            NotFoundError: If the contributor does not exist
        """
        return await self._repo.get_or_raise(self._session, contributor_id)

    async def role_association(self, contributor_id: int) -> ContributorRoleAssociation:
        role_ids = await self._roles.role_ids_for_contributor(self._session, contributor_id)
        return ContributorRoleAssociation(parent_id=contributor_id, association_ids=tuple(role_ids))

    async def create_contributor(self, payload: ContributorCreate) -> MutationResult[ProjectContributor]:
        """Create a contributor and assign its roles.

        Returns:
            The saved contributor; ``errors`` names roles that could not be assigned.
        """
        contributor = ProjectContributor(
            **payload.model_dump(exclude={"contributor_role_ids"}),
        )
        created = await self._repo.create(self._session, contributor)
        logger.info(
            "Contributor created",
            extra={"contributor_id": str(created.id), "project_id": str(created.project_id)},
        )

        result = MutationResult(entity=created)
        target = ContributorRoleAssociation(parent_id=created.id, association_ids=())
        await self._sync_roles(result, target, payload.contributor_role_ids, action="Created")
        return result

    async def update_contributor(
        self,
        contributor_id: int,
        payload: ContributorUpdate,
    ) -> MutationResult[ProjectContributor]:
        """Update a contributor and, when given, bring its roles to the requested set.

        Raises:
            NotFoundError: If the contributor does not exist
        """
        contributor = await self.get_contributor(contributor_id)

        for name, value in payload.model_dump(
            exclude_unset=True, exclude={"contributor_role_ids"}
        ).items():
            setattr(contributor, name, value)
        updated = await self._repo.update(self._session, contributor)

        result = MutationResult(entity=updated)
        if payload.contributor_role_ids is not None:
            target = await self.role_association(contributor_id)
            await self._sync_roles(result, target, payload.contributor_role_ids, action="Updated")

        lazy_logger.debug(
            lambda: f"service.update_contributor({contributor_id}) -> warnings={result.errors}"
        )
        return result

    async def _sync_roles(
        self,
        result: MutationResult[ProjectContributor],
        target: ContributorRoleAssociation,
        desired: Iterable[int],
        *,
        action: str,
    ) -> SyncOutcome[int]:
        contributor_id = target.parent_id
        outcome = await self._coordinator.sync(
            target,
            desired,
            remove_one=lambda role_id: self._roles.remove_from_contributor(
                self._session, role_id, contributor_id
            ),
            add_one=lambda role_id: self._roles.add_to_contributor(
                self._session, role_id, contributor_id
            ),
        )

        labels: dict[Any, str] = {}
        if outcome.has_failures:
            labels = await self._roles.labels(
                self._session, outcome.failed_removal_ids + outcome.failed_addition_ids
            )
        result.record(
            ROLES_FIELD,
            outcome,
            describe_sync_failures(outcome, action=action, noun="roles", labels=labels),
        )
        return outcome


__all__ = ["ROLES_FIELD", "ContributorRoleAssociation", "ContributorService"]
