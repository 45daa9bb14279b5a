"""External result shape shared by every search.

Serializes with the camelCase field names of the common result contract:
``items``, ``totalCount``, ``limit``, ``nextCursor``, ``currentOffset``,
``hasNextPage``, ``hasPreviousPage``, ``availableSortFields``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from collections.abc import Callable

    from dmp_service.core.pagination.types import PaginatedResult


class PaginatedResponse[T](BaseModel):
    """Paginated search response.

    Example:
        page = await repo.search(session, term="cc", options=options)
        body = PaginatedResponse[LicenseRead].from_result(page, LicenseRead.model_validate)
        return body.model_dump(by_alias=True, exclude_none=True)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T] = Field(default_factory=list, description="Rows on this page")
    total_count: int = Field(ge=0, description="Rows matching the search")
    limit: int = Field(ge=1, description="Effective page size")
    next_cursor: str | None = Field(default=None, description="Token for the next page")
    current_offset: int | None = Field(default=None, description="Offset of this page")
    has_next_page: bool = Field(default=False, description="Whether another page follows")
    has_previous_page: bool = Field(default=False, description="Whether a page precedes this one")
    available_sort_fields: list[str] = Field(
        default_factory=list,
        description="Sort fields accepted by this search",
    )

    @classmethod
    def from_result(
        cls,
        result: PaginatedResult[Any],
        convert: Callable[[Any], T] | None = None,
        **extra: Any,
    ) -> PaginatedResponse[T]:
        """Build from an engine result, converting each item with ``convert``.

        ``extra`` sets fields subclasses add to the common shape.
        """
        items = [convert(item) for item in result.items] if convert else list(result.items)
        return cls(
            items=items,
            total_count=result.total_count,
            limit=result.limit,
            next_cursor=result.next_cursor,
            current_offset=result.current_offset,
            has_next_page=result.has_next_page,
            has_previous_page=result.has_previous_page,
            available_sort_fields=list(result.available_sort_fields),
            **extra,
        )


__all__ = ["PaginatedResponse"]
