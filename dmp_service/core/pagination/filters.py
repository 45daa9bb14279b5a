"""Keyset and offset filters for SQLAlchemy queries.

``KeysetFilter`` implements the seek method: instead of OFFSET, a WHERE
condition seeks directly past the cursor position.

    For ORDER BY modified DESC, id ASC with cursor at (t1, id1):
    WHERE (modified < t1) OR (modified = t1 AND id > id1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, and_, or_

from dmp_service.core.database.filters import StatementFilter

if TYPE_CHECKING:
    from dmp_service.core.pagination.ordering import Ordering, OrderingKey, SortColumn


def _order_clause(sort: SortColumn) -> Any:
    return sort.column.desc() if sort.descending else sort.column.asc()


def _after(sort: SortColumn, value: Any) -> Any:
    return sort.column < value if sort.descending else sort.column > value


class KeysetFilter(StatementFilter):
    """Order by ``ordering`` and keep ``limit`` rows strictly after ``position``.

    The primary sort column of an ordering used for seeking must be
    non-nullable; ``NULL`` never compares greater or less than a value.

    Example:
        stmt = KeysetFilter(ordering, position, limit=21).apply(select(License))
    """

    def __init__(self, ordering: Ordering, position: OrderingKey | None, *, limit: int) -> None:
        self.ordering = ordering
        self.position = position
        self.limit = limit

    def apply(self, statement: Select[Any]) -> Select[Any]:
        primary, tie_break = self.ordering.columns
        statement = statement.order_by(None).order_by(
            _order_clause(primary), _order_clause(tie_break)
        )

        if self.position is not None:
            statement = statement.where(
                or_(
                    _after(primary, self.position.sort_value),
                    and_(
                        primary.column == self.position.sort_value,
                        _after(tie_break, self.position.id),
                    ),
                )
            )

        return statement.limit(self.limit)


class OffsetFilter(StatementFilter):
    """Order by ``ordering`` and keep ``limit`` rows starting at ``offset``."""

    def __init__(self, ordering: Ordering, *, offset: int, limit: int) -> None:
        self.ordering = ordering
        self.offset = offset
        self.limit = limit

    def apply(self, statement: Select[Any]) -> Select[Any]:
        primary, tie_break = self.ordering.columns
        return (
            statement.order_by(None)
            .order_by(_order_clause(primary), _order_clause(tie_break))
            .offset(self.offset)
            .limit(self.limit)
        )


__all__ = ["KeysetFilter", "OffsetFilter"]
