"""Many-to-many association reconciliation.

Usage:
    from dmp_service.core.associations import AssociationSyncCoordinator, reconcile

    delta = reconcile(current_ids, desired_ids)
    outcome = await AssociationSyncCoordinator("output_repositories").apply(
        delta, remove_one, add_one
    )
"""

from dmp_service.core.associations.coordinator import (
    ADD_FAILED,
    REMOVE_FAILED,
    AssociationError,
    AssociationFailure,
    AssociationSyncCoordinator,
    HasAssociationIds,
    LinkOperation,
    SyncOutcome,
)
from dmp_service.core.associations.links import AssociationLink
from dmp_service.core.associations.reconciler import AssociationDelta, reconcile
from dmp_service.core.associations.warnings import MutationResult, describe_sync_failures

__all__ = [
    "ADD_FAILED",
    "REMOVE_FAILED",
    "AssociationDelta",
    "AssociationError",
    "AssociationFailure",
    "AssociationLink",
    "AssociationSyncCoordinator",
    "HasAssociationIds",
    "LinkOperation",
    "MutationResult",
    "SyncOutcome",
    "describe_sync_failures",
    "reconcile",
]
