"""Field-level warnings for partially synced associations.

A mutation whose associations only partly synced still succeeded: the parent
was saved. The failures travel next to the saved entity as field errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from dmp_service.core.associations.coordinator import AssociationFailure, SyncOutcome


def _label_list(
    failures: tuple[AssociationFailure[Any], ...],
    labels: Mapping[Any, str] | Callable[[Any], str | None] | None,
) -> str:
    names = []
    for failure in failures:
        label = None
        if callable(labels):
            label = labels(failure.id)
        elif labels is not None:
            label = labels.get(failure.id)
        names.append(label or str(failure.id))
    return ", ".join(names)


def describe_sync_failures(
    outcome: SyncOutcome[Any],
    *,
    action: str = "Updated",
    noun: str = "associations",
    labels: Mapping[Any, str] | Callable[[Any], str | None] | None = None,
) -> str | None:
    """Render an outcome's failures as one sentence, or None when fully applied.

    Example:
        describe_sync_failures(outcome, action="Updated", noun="roles", labels=role_labels)
        # "Updated but unable to remove roles: Data curation, unable to assign roles: Software"
    """
    if outcome.fully_applied:
        return None

    parts = []
    if outcome.failed_removals:
        parts.append(f"unable to remove {noun}: {_label_list(outcome.failed_removals, labels)}")
    if outcome.failed_additions:
        parts.append(f"unable to assign {noun}: {_label_list(outcome.failed_additions, labels)}")
    return f"{action} but {', '.join(parts)}"


@dataclass(slots=True)
class MutationResult[T]:
    """A saved entity plus field-level errors from its association syncs.

    ``errors`` being non-empty does not mean the mutation failed.
    """

    entity: T
    errors: dict[str, str] = field(default_factory=dict)
    outcomes: dict[str, SyncOutcome[Any]] = field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        return bool(self.errors)

    def record(self, field_name: str, outcome: SyncOutcome[Any], message: str | None) -> None:
        """Keep ``outcome`` under ``field_name`` and its warning when there is one."""
        self.outcomes[field_name] = outcome
        if message:
            self.errors[field_name] = message


__all__ = ["MutationResult", "describe_sync_failures"]
