"""Apply association deltas, aggregating per-id failures.

The coordinator calls the per-id remove/add operations owned by the related
entity's repository. A per-id failure, reported by returning ``False`` or by
raising ``AssociationError``, is recorded and the coordinator moves on; it
never stops early. Anything else the callbacks raise (connection loss and
other store failures) propagates unchanged.

The coordinator opens no transaction. A crash mid-apply leaves the
association set partially synced.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from dmp_service.core.associations.reconciler import AssociationDelta, reconcile
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

REMOVE_FAILED = "could not be removed"
ADD_FAILED = "could not be added"


class AssociationError(Exception):
    """A single link could not be added or removed.

    Raised by per-id operations that can say why, e.g. the related record
    does not exist.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(slots=True, frozen=True)
class AssociationFailure[K: Hashable]:
    """One id whose link could not be synced."""

    id: K
    reason: str


@dataclass(slots=True, frozen=True)
class SyncOutcome[K: Hashable]:
    """Result of applying an ``AssociationDelta``.

    Attributes:
        delta: The delta that was applied.
        applied_removals: Ids whose links were removed.
        applied_additions: Ids whose links were added.
        failed_removals: Removals that failed, with reasons.
        failed_additions: Additions that failed, with reasons.
    """

    delta: AssociationDelta[K]
    applied_removals: tuple[K, ...] = ()
    applied_additions: tuple[K, ...] = ()
    failed_removals: tuple[AssociationFailure[K], ...] = ()
    failed_additions: tuple[AssociationFailure[K], ...] = ()

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_removals or self.failed_additions)

    @property
    def fully_applied(self) -> bool:
        return not self.has_failures

    @property
    def failed_removal_ids(self) -> tuple[K, ...]:
        return tuple(failure.id for failure in self.failed_removals)

    @property
    def failed_addition_ids(self) -> tuple[K, ...]:
        return tuple(failure.id for failure in self.failed_additions)

    @property
    def resulting_ids(self) -> frozenset[K]:
        """Associated ids after the apply: retained, newly added, and failed removals."""
        return frozenset(self.delta.retained) | frozenset(self.applied_additions) | frozenset(
            self.failed_removal_ids
        )


class HasAssociationIds[K: Hashable](Protocol):
    """A parent record together with the ids currently linked to it."""

    @property
    def parent_id(self) -> Hashable: ...

    @property
    def association_ids(self) -> Iterable[K]: ...


type LinkOperation[K] = Callable[[K], Awaitable[bool]]


class AssociationSyncCoordinator:
    """Apply deltas through per-id callbacks.

    Removals run first, then additions, each id exactly once, sequentially.

    Example:
        coordinator = AssociationSyncCoordinator("contributor_roles")
        outcome = await coordinator.reconcile_and_apply(
            current_role_ids,
            desired_role_ids,
            remove_one=lambda role_id: roles.remove_from_contributor(session, role_id, contributor.id),
            add_one=lambda role_id: roles.add_to_contributor(session, role_id, contributor.id),
        )
        if outcome.has_failures:
            ...
    """

    __slots__ = ("name",)

    def __init__(self, name: str = "association") -> None:
        self.name = name

    async def apply[K: Hashable](
        self,
        delta: AssociationDelta[K],
        remove_one: LinkOperation[K],
        add_one: LinkOperation[K],
    ) -> SyncOutcome[K]:
        """Apply ``delta``, never raising for a per-id failure."""
        applied_removals, failed_removals = await self._run(delta.to_remove, remove_one, REMOVE_FAILED)
        applied_additions, failed_additions = await self._run(delta.to_add, add_one, ADD_FAILED)

        outcome = SyncOutcome(
            delta=delta,
            applied_removals=applied_removals,
            applied_additions=applied_additions,
            failed_removals=failed_removals,
            failed_additions=failed_additions,
        )

        if outcome.has_failures:
            logger.warning(
                "Association sync applied with partial errors",
                extra={
                    "association": self.name,
                    "failed_removals": [str(k) for k in outcome.failed_removal_ids],
                    "failed_additions": [str(k) for k in outcome.failed_addition_ids],
                },
            )
        lazy_logger.debug(
            lambda: (
                f"{self.name}: removed {len(applied_removals)}/{len(delta.to_remove)}, "
                f"added {len(applied_additions)}/{len(delta.to_add)}"
            )
        )
        return outcome

    async def reconcile_and_apply[K: Hashable](
        self,
        current: Iterable[K],
        desired: Iterable[K],
        remove_one: LinkOperation[K],
        add_one: LinkOperation[K],
    ) -> SyncOutcome[K]:
        """Reconcile ``current`` against ``desired`` and apply the delta."""
        return await self.apply(reconcile(current, desired), remove_one, add_one)

    async def sync[K: Hashable](
        self,
        target: HasAssociationIds[K],
        desired: Iterable[K],
        remove_one: LinkOperation[K],
        add_one: LinkOperation[K],
    ) -> SyncOutcome[K]:
        """Bring ``target``'s associations to ``desired``."""
        lazy_logger.debug(lambda: f"{self.name}: syncing parent {target.parent_id!r}")
        return await self.reconcile_and_apply(target.association_ids, desired, remove_one, add_one)

    async def _run[K: Hashable](
        self,
        ids: tuple[K, ...],
        operation: LinkOperation[K],
        default_reason: str,
    ) -> tuple[tuple[K, ...], tuple[AssociationFailure[K], ...]]:
        applied: list[K] = []
        failed: list[AssociationFailure[K]] = []
        for item_id in ids:
            try:
                ok = await operation(item_id)
            except AssociationError as e:
                failed.append(AssociationFailure(id=item_id, reason=e.reason))
                continue
            if ok:
                applied.append(item_id)
            else:
                failed.append(AssociationFailure(id=item_id, reason=default_reason))
        return tuple(applied), tuple(failed)


__all__ = [
    "ADD_FAILED",
    "REMOVE_FAILED",
    "AssociationError",
    "AssociationFailure",
    "AssociationSyncCoordinator",
    "HasAssociationIds",
    "LinkOperation",
    "SyncOutcome",
]
