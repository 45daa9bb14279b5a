"""In-memory stand-ins shared by the pagination tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dmp_service.core.pagination import AfterPosition, AtOffset, SortDirection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dmp_service.core.pagination import Ordering, PageBounds


@dataclass(frozen=True)
class Row:
    """Plain record paged by ``InMemoryPageFetcher``."""

    id: int
    name: str
    score: int = 0


class InMemoryPageFetcher:
    """``PageFetcher`` over a list of objects; ``statement`` is the list itself."""

    def __init__(self) -> None:
        self.fetch_calls: list[PageBounds] = []
        self.count_calls = 0

    async def fetch_page(self, statement: Sequence[Any], ordering: Ordering, bounds: PageBounds) -> list[Any]:
        self.fetch_calls.append(bounds)
        primary, tie = ordering.primary.attribute, ordering.tie_break.attribute
        descending = ordering.primary.direction is SortDirection.DESC

        rows = sorted(statement, key=lambda row: getattr(row, tie))
        rows = sorted(rows, key=lambda row: getattr(row, primary), reverse=descending)

        match bounds:
            case AfterPosition(position=None, limit=limit):
                return rows[:limit]
            case AfterPosition(position=position, limit=limit):

                def after(row: Any) -> bool:
                    value = getattr(row, primary)
                    if value == position.sort_value:
                        return getattr(row, tie) > position.id
                    return value < position.sort_value if descending else value > position.sort_value

                return [row for row in rows if after(row)][:limit]
            case AtOffset(offset=offset, limit=limit):
                return rows[offset : offset + limit]
        raise TypeError(bounds)

    async def count(self, statement: Sequence[Any]) -> int:
        self.count_calls += 1
        return len(statement)
