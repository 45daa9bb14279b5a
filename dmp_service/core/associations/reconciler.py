"""Set-difference reconciliation of many-to-many associations."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(slots=True, frozen=True)
class AssociationDelta[K: Hashable]:
    """Links to remove and add to turn the current id set into the desired one.

    Ids keep the order of their first appearance in the inputs and are never
    repeated. ``to_remove`` and ``to_add`` are disjoint; ids in both inputs
    appear only in ``retained``.
    """

    to_remove: tuple[K, ...] = ()
    to_add: tuple[K, ...] = ()
    retained: tuple[K, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add


def reconcile[K: Hashable](current: Iterable[K], desired: Iterable[K]) -> AssociationDelta[K]:
    """Compute the delta between ``current`` and ``desired`` ids.

    Linear in the size of both inputs; duplicates are ignored.

    Example:
        delta = reconcile([1, 2, 3], [2, 3, 4])
        delta.to_remove  # (1,)
        delta.to_add     # (4,)
    """
    current_ids = dict.fromkeys(current)
    desired_ids = dict.fromkeys(desired)

    return AssociationDelta(
        to_remove=tuple(k for k in current_ids if k not in desired_ids),
        to_add=tuple(k for k in desired_ids if k not in current_ids),
        retained=tuple(k for k in current_ids if k in desired_ids),
    )


__all__ = ["AssociationDelta", "reconcile"]
