"""Dual-mode (cursor and offset) pagination.

Usage:
    from dmp_service.core.pagination import (
        PaginatedQuery,
        PaginationEngine,
        PaginationOptions,
        SqlAlchemyPageFetcher,
    )

    engine = PaginationEngine(SqlAlchemyPageFetcher(session))
    query = PaginatedQuery.for_model(
        select(License),
        License,
        default="name",
        sortable={"name": License.name, "created": License.created_at},
    )
    page = await engine.paginate(query, PaginationOptions(type="CURSOR", limit=10))
"""

from dmp_service.core.pagination.cursor import CursorCodec
from dmp_service.core.pagination.engine import PaginationEngine
from dmp_service.core.pagination.exceptions import (
    InvalidCursorError,
    InvalidPaginationOptionsError,
)
from dmp_service.core.pagination.fetcher import (
    AfterPosition,
    AtOffset,
    PageBounds,
    PageFetcher,
    SqlAlchemyPageFetcher,
)
from dmp_service.core.pagination.filters import KeysetFilter, OffsetFilter
from dmp_service.core.pagination.ordering import Ordering, OrderingKey, SortColumn
from dmp_service.core.pagination.query import PaginatedQuery
from dmp_service.core.pagination.schemas import PaginatedResponse
from dmp_service.core.pagination.types import (
    PaginatedResult,
    PaginationOptions,
    PaginationType,
    ResolvedOptions,
    SortDirection,
)

__all__ = [
    "AfterPosition",
    "AtOffset",
    "CursorCodec",
    "InvalidCursorError",
    "InvalidPaginationOptionsError",
    "KeysetFilter",
    "OffsetFilter",
    "Ordering",
    "OrderingKey",
    "PageBounds",
    "PageFetcher",
    "PaginatedQuery",
    "PaginatedResponse",
    "PaginatedResult",
    "PaginationEngine",
    "PaginationOptions",
    "PaginationType",
    "ResolvedOptions",
    "SortColumn",
    "SortDirection",
    "SqlAlchemyPageFetcher",
]
