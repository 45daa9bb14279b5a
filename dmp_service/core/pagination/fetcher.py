"""Bounded page and count fetches against the backing store.

The engine only talks to a ``PageFetcher``: it hands over the filtered
statement, the resolved ordering and a bounds request, and never builds SQL
itself. ``SqlAlchemyPageFetcher`` is the production implementation; tests
use an in-memory fetcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from sqlalchemy import func, select

from dmp_service.core.pagination.filters import KeysetFilter, OffsetFilter
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination.ordering import Ordering, OrderingKey

lazy_logger = get_lazy_logger(__name__)


@dataclass(slots=True, frozen=True)
class AfterPosition:
    """Up to ``limit`` rows strictly after ``position`` (``None`` = from the start)."""

    position: OrderingKey | None
    limit: int


@dataclass(slots=True, frozen=True)
class AtOffset:
    """Up to ``limit`` rows starting at row ``offset``."""

    offset: int
    limit: int


type PageBounds = AfterPosition | AtOffset


class PageFetcher[T](Protocol):
    """Store access used by ``PaginationEngine``."""

    async def fetch_page(self, statement: Any, ordering: Ordering, bounds: PageBounds) -> Sequence[T]:
        """Rows of ``statement`` in ``ordering`` order, restricted to ``bounds``."""
        ...

    async def count(self, statement: Any) -> int:
        """Number of rows ``statement`` matches, ignoring ordering and bounds."""
        ...


class SqlAlchemyPageFetcher[T]:
    """``PageFetcher`` running select statements on an injected ``AsyncSession``.

    Example:
        fetcher = SqlAlchemyPageFetcher(session)
        rows = await fetcher.fetch_page(select(License), ordering, AtOffset(0, 20))
    """

    __slots__ = ("_session",)

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def fetch_page(self, statement: Any, ordering: Ordering, bounds: PageBounds) -> Sequence[T]:
        match bounds:
            case AfterPosition(position=position, limit=limit):
                paged = KeysetFilter(ordering, position, limit=limit).apply(statement)
            case AtOffset(offset=offset, limit=limit):
                paged = OffsetFilter(ordering, offset=offset, limit=limit).apply(statement)
            case _:
                raise TypeError(f"Unsupported page bounds: {bounds!r}")

        result = await self._session.execute(paged)
        rows = result.scalars().all()
        lazy_logger.debug(lambda: f"db.fetch_page: {ordering.signature} {bounds!r} -> {len(rows)} rows")
        return rows

    async def count(self, statement: Any) -> int:
        count_stmt = select(func.count()).select_from(statement.order_by(None).subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()
        lazy_logger.debug(lambda: f"db.count: {total} rows")
        return int(total)


__all__ = [
    "AfterPosition",
    "AtOffset",
    "PageBounds",
    "PageFetcher",
    "SqlAlchemyPageFetcher",
]
