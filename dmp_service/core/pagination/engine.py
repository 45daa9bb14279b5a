"""Dual-mode pagination engine.

One engine serves both cursor pagination (forward-only "infinite scroll")
and offset pagination ("page N of M") for every search.

Flow for a request:
1. ``resolve_options`` validates and defaults the raw options and picks the mode.
2. The query resolves the ordering (sort field honored in OFFSET mode only).
3. The fetcher counts every row the filters match.
4. The fetcher returns one bounded page; the engine derives the page flags.

Mode selection: an explicit ``type`` wins; otherwise OFFSET when an offset
is supplied, CURSOR when a cursor is supplied, and the configured default
type when neither is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dmp_service.core.pagination.cursor import CursorCodec
from dmp_service.core.pagination.exceptions import (
    InvalidCursorError,
    InvalidPaginationOptionsError,
)
from dmp_service.core.pagination.fetcher import AfterPosition, AtOffset
from dmp_service.core.pagination.types import (
    PaginatedResult,
    PaginationOptions,
    PaginationType,
    ResolvedOptions,
    SortDirection,
)
from dmp_service.core.settings import get_pagination_settings
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from dmp_service.core.pagination.fetcher import PageFetcher
    from dmp_service.core.pagination.ordering import Ordering
    from dmp_service.core.pagination.query import PaginatedQuery
    from dmp_service.core.settings import PaginationSettings

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class PaginationEngine:
    """Assemble ``PaginatedResult`` pages from a ``PageFetcher``.

    The fetcher, and through it the store connection, is injected so tests can
    substitute an in-memory fetcher.

    Example:
        engine = PaginationEngine(SqlAlchemyPageFetcher(session))
        page = await engine.paginate(query, PaginationOptions(type="CURSOR", limit=10))
        if page.has_next_page:
            page = await engine.paginate(
                query, PaginationOptions(type="CURSOR", limit=10, cursor=page.next_cursor)
            )
    """

    __slots__ = ("_fetcher", "_codec", "_settings")

    def __init__(
        self,
        fetcher: PageFetcher[Any],
        *,
        codec: CursorCodec | None = None,
        settings: PaginationSettings | None = None,
    ) -> None:
        self._settings = settings or get_pagination_settings()
        self._fetcher = fetcher
        self._codec = codec or CursorCodec.from_settings(self._settings)

    @property
    def codec(self) -> CursorCodec:
        return self._codec

    def resolve_options(self, options: PaginationOptions | None) -> ResolvedOptions:
        """Validate ``options`` and apply defaults.

        Raises:
            InvalidPaginationOptionsError: limit <= 0, offset < 0, or an unknown
                pagination type or sort direction.
        """
        options = options or PaginationOptions()

        if options.type is not None:
            mode = self._parse_enum(PaginationType, options.type, "type")
        elif options.offset is not None:
            mode = PaginationType.OFFSET
        elif options.cursor:
            mode = PaginationType.CURSOR
        else:
            mode = PaginationType(self._settings.default_type)

        limit = options.limit
        if limit is None:
            limit = self._settings.default_limit
        elif limit <= 0:
            raise InvalidPaginationOptionsError(
                "limit must be a positive integer", extra={"limit": limit}
            )
        elif limit > self._settings.max_limit:
            lazy_logger.debug(lambda: f"Clamping limit {limit} to {self._settings.max_limit}")
            limit = self._settings.max_limit

        offset = options.offset or 0
        if offset < 0:
            raise InvalidPaginationOptionsError(
                "offset must not be negative", extra={"offset": offset}
            )

        sort_dir = SortDirection.ASC
        if options.sort_dir:
            sort_dir = self._parse_enum(SortDirection, options.sort_dir, "sortDir")

        return ResolvedOptions(
            mode=mode,
            limit=limit,
            cursor=options.cursor or None,
            offset=offset,
            sort_field=options.sort_field or None,
            sort_dir=sort_dir,
        )

    async def paginate[T](
        self,
        query: PaginatedQuery[T],
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[T]:
        """Fetch one page of ``query``.

        Raises:
            InvalidPaginationOptionsError: If the options are invalid.
            InvalidCursorError: If the cursor is malformed, tampered with, or
                was issued for a different ordering.
        """
        resolved = self.resolve_options(options)
        ordering = query.resolve_ordering(resolved)

        # Validate the cursor before touching the store.
        position = None
        if resolved.mode is PaginationType.CURSOR and resolved.cursor:
            position = self._codec.decode(resolved.cursor)
            if position.signature != ordering.signature:
                logger.info(
                    "Cursor issued for a different ordering",
                    extra={"cursor_ordering": position.signature, "ordering": ordering.signature},
                )
                raise InvalidCursorError(
                    "Cursor does not match the current sort order, restart from the first page"
                )

        total_count = await self._fetcher.count(query.statement)

        if resolved.mode is PaginationType.CURSOR:
            result = await self._cursor_page(query, ordering, resolved, position, total_count)
        else:
            result = await self._offset_page(query, ordering, resolved, total_count)

        lazy_logger.debug(
            lambda: (
                f"paginate: mode={resolved.mode} ordering={ordering.signature} "
                f"items={len(result.items)} total={total_count} next={result.has_next_page}"
            )
        )
        return result

    async def _cursor_page[T](
        self,
        query: PaginatedQuery[T],
        ordering: Ordering,
        resolved: ResolvedOptions,
        position: Any,
        total_count: int,
    ) -> PaginatedResult[T]:
        limit = resolved.limit
        rows = list(
            await self._fetcher.fetch_page(
                query.statement, ordering, AfterPosition(position=position, limit=limit + 1)
            )
        )

        has_next_page = len(rows) > limit
        items = rows[:limit]
        next_cursor = None
        if has_next_page:
            next_cursor = self._codec.encode(ordering.key_for(items[-1]))

        return PaginatedResult(
            items=items,
            total_count=total_count,
            limit=limit,
            next_cursor=next_cursor,
            has_next_page=has_next_page,
            has_previous_page=position is not None,
        )

    async def _offset_page[T](
        self,
        query: PaginatedQuery[T],
        ordering: Ordering,
        resolved: ResolvedOptions,
        total_count: int,
    ) -> PaginatedResult[T]:
        limit, offset = resolved.limit, resolved.offset
        items = list(
            await self._fetcher.fetch_page(
                query.statement, ordering, AtOffset(offset=offset, limit=limit)
            )
        )

        return PaginatedResult(
            items=items,
            total_count=total_count,
            limit=limit,
            current_offset=offset if offset > 0 else None,
            has_next_page=offset + len(items) < total_count,
            has_previous_page=offset > 0,
            available_sort_fields=query.available_sort_fields,
        )

    @staticmethod
    def _parse_enum[E: (PaginationType, SortDirection)](enum: type[E], raw: str, name: str) -> E:
        try:
            return enum(raw.strip().upper())
        except ValueError:
            allowed = ", ".join(member.value for member in enum)
            raise InvalidPaginationOptionsError(
                f"{name} must be one of {allowed}", extra={name: raw}
            ) from None


__all__ = ["PaginationEngine"]
