"""Statement filters used by the search repositories.

Filters work directly on SQLAlchemy statements without hiding the query.
Each one is a no-op when its value is empty, so searches can apply every
optional filter unconditionally.

Usage:
    stmt = select(License)
    stmt = SearchFilter([License.name, License.uri], term).apply(stmt)
    stmt = BooleanFilter(License.recommended, recommended).apply(stmt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import Select, and_, false, func, or_

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute


class StatementFilter(ABC):
    """Base class for statement filters."""

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Return ``statement`` with the filter applied."""
        ...


class SearchFilter(StatementFilter):
    """Case-insensitive substring match across one or more columns.

    Example:
        stmt = SearchFilter([Affiliation.name, Affiliation.acronyms], "calif").apply(stmt)
        # WHERE (lower(name) LIKE '%calif%' OR lower(acronyms) LIKE '%calif%')
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        value: str | None,
        *,
        operator: Literal["and", "or"] = "or",
    ):
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)
        self.value = value.strip() if value else None
        self.operator = operator

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if not self.value or not self.fields:
            return statement

        pattern = f"%{self.value.lower()}%"
        conditions = [func.lower(field).like(pattern) for field in self.fields]

        if self.operator == "or":
            return statement.where(or_(*conditions))
        return statement.where(and_(*conditions))


class CollectionFilter(StatementFilter):
    """``IN`` filter on a column.

    ``values=None`` leaves the statement untouched while an empty collection
    matches nothing.

    Example:
        stmt = CollectionFilter(Template.owner_id, owner_uris).apply(stmt)
    """

    def __init__(
        self,
        field: InstrumentedAttribute[Any],
        values: Sequence[Any] | None,
    ):
        self.field = field
        self.values = values

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if self.values is None:
            return statement
        if not self.values:
            return statement.where(false())
        return statement.where(self.field.in_(list(self.values)))


class EqualityFilter(StatementFilter):
    """``column = value`` when ``value`` is not None."""

    def __init__(self, field: InstrumentedAttribute[Any], value: Any):
        self.field = field
        self.value = value

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if self.value is None:
            return statement
        return statement.where(self.field == self.value)


class BooleanFilter(EqualityFilter):
    """Match a boolean column; ``None`` means "either"."""

    def __init__(self, field: InstrumentedAttribute[Any], value: bool | None):
        super().__init__(field, value)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        if self.value is None:
            return statement
        return statement.where(self.field.is_(bool(self.value)))


def apply_filters(statement: Select[Any], *filters: StatementFilter) -> Select[Any]:
    """Apply ``filters`` in order."""
    for statement_filter in filters:
        statement = statement_filter.apply(statement)
    return statement


__all__ = [
    "BooleanFilter",
    "CollectionFilter",
    "EqualityFilter",
    "SearchFilter",
    "StatementFilter",
    "apply_filters",
]
