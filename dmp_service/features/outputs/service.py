"""Service layer for the research outputs feature."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dmp_service.core.associations import (
    AssociationSyncCoordinator,
    MutationResult,
    describe_sync_failures,
)
from dmp_service.features.metadata_standards import (
    OUTPUT_METADATA_STANDARDS,
    MetadataStandardRepository,
    get_metadata_standard_repository,
)
from dmp_service.features.outputs.models import ResearchOutput
from dmp_service.features.outputs.repository import (
    ResearchOutputRepository,
    get_research_output_repository,
)
from dmp_service.features.repositories import (
    OUTPUT_REPOSITORIES,
    RepositoryRepository,
    get_repository_repository,
)
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.associations import SyncOutcome
    from dmp_service.core.database import BaseRepository
    from dmp_service.features.outputs.schemas import ResearchOutputCreate, ResearchOutputUpdate


# Standard logger for INFO/WARNING/ERROR
logger = logging.getLogger(__name__)
# Lazy logger for DEBUG (zero overhead when DEBUG disabled)
lazy_logger = get_lazy_logger(__name__)

REPOSITORIES_FIELD = "repositories"
METADATA_STANDARDS_FIELD = "metadataStandards"


@dataclass(slots=True, frozen=True)
class OutputAssociation:
    """A research output and the ids linked to it through one link table."""

    parent_id: int
    association_ids: tuple[int, ...]


class ResearchOutputService:
    """Service for research output operations.

    Handles business logic for:
    - Output creation and updates
    - Syncing the repositories an output is deposited in
    - Syncing the metadata standards an output follows

    Link failures never fail the update; each relationship reports its own
    warning on the returned ``MutationResult``.
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: ResearchOutputRepository | None = None,
        repositories: RepositoryRepository | None = None,
        standards: MetadataStandardRepository | None = None,
    ) -> None:
        """Initialize the research output service.

        Args:
            session: Database session for operations
            repo: Output repository (optional, uses default if not provided)
            repositories: Data repository repository, owns the output links
            standards: Metadata standard repository, owns the output links
        """
        self._session = session
        self._repo = repo or get_research_output_repository()
        self._repositories = repositories or get_repository_repository()
        self._standards = standards or get_metadata_standard_repository()
        self._repository_sync = AssociationSyncCoordinator(OUTPUT_REPOSITORIES.name)
        self._standard_sync = AssociationSyncCoordinator(OUTPUT_METADATA_STANDARDS.name)

    async def get_output(self, output_id: int) -> ResearchOutput:
        """Get an output by ID.

        Raises:
            NotFoundError: If output not found
        """
        return await self._repo.get_or_raise(self._session, output_id)

    async def create_output(self, payload: ResearchOutputCreate) -> ResearchOutput:
        output = ResearchOutput(**payload.model_dump())
        created = await self._repo.create(self._session, output)

        logger.info(
            "Research output created",
            extra={"output_id": str(created.id), "project_id": str(created.project_id)},
        )
        return created

    async def update_output(
        self,
        output_id: int,
        payload: ResearchOutputUpdate,
    ) -> MutationResult[ResearchOutput]:
        """Update an output and sync the relationships the payload names.

        Args:
            output_id: Output ID
            payload: Update data

        Returns:
            The saved output. ``errors`` may carry ``repositories`` and
            ``metadataStandards`` warnings.

        Raises:
            NotFoundError: If output not found
        """
        output = await self.get_output(output_id)

        for name, value in payload.model_dump(
            exclude_unset=True,
            exclude={"repository_ids", "metadata_standard_ids"},
        ).items():
            setattr(output, name, value)
        updated = await self._repo.update(self._session, output)

        result = MutationResult(entity=updated)

        if payload.repository_ids is not None:
            current = await OUTPUT_REPOSITORIES.current_ids(self._session, output_id)
            outcome = await self._repository_sync.sync(
                OutputAssociation(parent_id=output_id, association_ids=tuple(current)),
                payload.repository_ids,
                remove_one=lambda repository_id: self._repositories.remove_from_output(
                    self._session, repository_id, output_id
                ),
                add_one=lambda repository_id: self._repositories.add_to_output(
                    self._session, repository_id, output_id
                ),
            )
            labels = await self._failure_labels(self._repositories, outcome)
            result.record(
                REPOSITORIES_FIELD,
                outcome,
                describe_sync_failures(outcome, noun="repositories", labels=labels),
            )

        if payload.metadata_standard_ids is not None:
            current = await OUTPUT_METADATA_STANDARDS.current_ids(self._session, output_id)
            outcome = await self._standard_sync.sync(
                OutputAssociation(parent_id=output_id, association_ids=tuple(current)),
                payload.metadata_standard_ids,
                remove_one=lambda standard_id: self._standards.remove_from_output(
                    self._session, standard_id, output_id
                ),
                add_one=lambda standard_id: self._standards.add_to_output(
                    self._session, standard_id, output_id
                ),
            )
            labels = await self._failure_labels(self._standards, outcome)
            result.record(
                METADATA_STANDARDS_FIELD,
                outcome,
                describe_sync_failures(outcome, noun="metadata standards", labels=labels),
            )

        if result.has_warnings:
            logger.info(
                "Research output updated with association warnings",
                extra={"output_id": str(output_id), "fields": sorted(result.errors)},
            )
        lazy_logger.debug(lambda: f"service.update_output({output_id}) -> updated")
        return result

    async def _failure_labels(
        self, repo: BaseRepository[Any], outcome: SyncOutcome[Any]
    ) -> dict[Any, str]:
        if not outcome.has_failures:
            return {}
        records = await repo.get_many(
            self._session, outcome.failed_removal_ids + outcome.failed_addition_ids
        )
        return {record.id: record.name for record in records}


__all__ = [
    "METADATA_STANDARDS_FIELD",
    "REPOSITORIES_FIELD",
    "OutputAssociation",
    "ResearchOutputService",
]
