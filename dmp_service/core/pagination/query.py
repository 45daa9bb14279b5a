"""Filtered, ordered queries handed to the pagination engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dmp_service.core.pagination.ordering import Ordering, SortColumn
from dmp_service.core.pagination.types import PaginationType, SortDirection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dmp_service.core.pagination.types import ResolvedOptions


@dataclass(slots=True, frozen=True)
class PaginatedQuery[T]:
    """A search statement with its default ordering and sort allow-list.

    Attributes:
        statement: Select with every search filter applied and no ordering.
        default_sort: Ordering used in CURSOR mode and when no valid sort
            field is requested. Its column must be non-nullable.
        tie_break: Unique column appended to every ordering.
        sort_fields: Columns OFFSET-mode callers may sort by, keyed by public name.
        scope: Names the searched set in cursor signatures (the table name
            for ``for_model``).

    Example:
        query = PaginatedQuery.for_model(
            select(License).where(...),
            License,
            default="name",
            sortable={"name": License.name, "created": License.created_at},
        )
    """

    statement: Any = field(compare=False)
    default_sort: SortColumn
    tie_break: SortColumn
    sort_fields: tuple[SortColumn, ...] = ()
    scope: str = ""

    @classmethod
    def for_model(
        cls,
        statement: Any,
        model: type[T],
        *,
        default: str,
        sortable: Mapping[str, Any],
        default_direction: SortDirection = SortDirection.ASC,
    ) -> PaginatedQuery[T]:
        """Build a query over ``model`` tie-broken by its ``id`` column.

        ``default`` must be one of the ``sortable`` names.
        """
        sort_fields = tuple(SortColumn.of(name, column) for name, column in sortable.items())
        by_name = {sort.name: sort for sort in sort_fields}
        if default not in by_name:
            raise ValueError(f"Default sort field {default!r} is not sortable")
        return cls(
            statement=statement,
            default_sort=by_name[default].with_direction(default_direction),
            tie_break=SortColumn.of("id", model.id),  # type: ignore[attr-defined]
            sort_fields=sort_fields,
            scope=model.__tablename__,  # type: ignore[attr-defined]
        )

    @property
    def available_sort_fields(self) -> tuple[str, ...]:
        return tuple(sort.name for sort in self.sort_fields)

    def sort_field(self, name: str) -> SortColumn | None:
        for sort in self.sort_fields:
            if sort.name == name:
                return sort
        return None

    @property
    def default_ordering(self) -> Ordering:
        return Ordering(primary=self.default_sort, tie_break=self.tie_break, scope=self.scope)

    def resolve_ordering(self, options: ResolvedOptions) -> Ordering:
        """Ordering for a request.

        OFFSET mode honors an allow-listed ``sort_field`` with ``sort_dir``.
        Anything else, including an unknown field, gets the default ordering.
        """
        if options.mode is PaginationType.OFFSET and options.sort_field:
            sort = self.sort_field(options.sort_field)
            if sort is not None:
                return Ordering(
                    primary=sort.with_direction(options.sort_dir), tie_break=self.tie_break, scope=self.scope
                )
        return self.default_ordering


__all__ = ["PaginatedQuery"]
