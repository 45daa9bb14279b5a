"""Result-set ordering and the positions cursors point at.

An ``Ordering`` is one user-visible sort column followed by a unique
tie-break column (the primary key), which makes the order total. An
``OrderingKey`` is a row's position in that order: the signature of the
ordering plus the row's values for both columns.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from dmp_service.core.pagination.types import SortDirection


@dataclass(slots=True, frozen=True)
class OrderingKey:
    """Position of a row within an ordering.

    Attributes:
        signature: ``Ordering.signature`` of the ordering the position belongs to.
        sort_value: The row's value for the primary sort column.
        id: The row's tie-break (primary key) value.
    """

    signature: str
    sort_value: Any
    id: Any


@dataclass(slots=True, frozen=True)
class SortColumn:
    """A sortable column.

    Attributes:
        name: Public sort field name (e.g. ``"created"``).
        attribute: Attribute read from result rows (e.g. ``"created_at"``).
        column: SQL expression to order by; unused by in-memory fetchers.
        direction: Sort direction.
    """

    name: str
    attribute: str
    column: Any = field(default=None, compare=False, hash=False, repr=False)
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def of(cls, name: str, column: Any, direction: SortDirection = SortDirection.ASC) -> SortColumn:
        """Build from an ORM attribute, reading rows by the attribute's key."""
        return cls(name=name, attribute=column.key, column=column, direction=direction)

    def with_direction(self, direction: SortDirection) -> SortColumn:
        return replace(self, direction=direction)

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(slots=True, frozen=True)
class Ordering:
    """Primary sort column plus unique tie-break column, within a query scope."""

    primary: SortColumn
    tie_break: SortColumn
    scope: str = ""

    @property
    def columns(self) -> tuple[SortColumn, SortColumn]:
        return (self.primary, self.tie_break)

    @property
    def signature(self) -> str:
        """Stable text identifying this ordering, e.g. ``licenses/name:ASC,id:ASC``.

        Prefixed with the scope when one is set; cursors never cross scopes.
        """
        columns = ",".join(f"{col.name}:{col.direction.value}" for col in self.columns)
        return f"{self.scope}/{columns}" if self.scope else columns

    def key_for(self, row: Any) -> OrderingKey:
        """Position of ``row`` in this ordering."""
        return OrderingKey(
            signature=self.signature,
            sort_value=getattr(row, self.primary.attribute),
            id=getattr(row, self.tie_break.attribute),
        )


__all__ = ["Ordering", "OrderingKey", "SortColumn"]
