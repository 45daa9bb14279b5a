"""Pagination input and output types shared by every search.

``PaginationOptions`` is the raw, lenient caller input: values are only
checked by ``PaginationEngine.resolve_options`` so every search reports bad
input the same way. ``PaginatedResult`` is the engine output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Sequence


class PaginationType(StrEnum):
    """Pagination mode."""

    CURSOR = "CURSOR"
    OFFSET = "OFFSET"


class SortDirection(StrEnum):
    """Sort direction for the primary ordering column."""

    ASC = "ASC"
    DESC = "DESC"


class PaginationOptions(BaseModel):
    """Caller-supplied pagination and search options.

    Field names follow the external input shape (``sortField``, ``sortDir``,
    ``bestPractice``, ``selectOwnerURIs``); snake_case names are accepted too.

    Example:
        options = PaginationOptions(type="CURSOR", limit=10)
        options = PaginationOptions.model_validate({"offset": 20, "sortField": "created"})
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    type: str | None = None
    cursor: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort_field: str | None = Field(default=None, alias="sortField")
    sort_dir: str | None = Field(default=None, alias="sortDir")
    best_practice: bool | None = Field(default=None, alias="bestPractice")
    select_owner_uris: list[str] | None = Field(default=None, alias="selectOwnerURIs")


@dataclass(slots=True, frozen=True)
class ResolvedOptions:
    """Options after validation and defaulting."""

    mode: PaginationType
    limit: int
    cursor: str | None = None
    offset: int = 0
    sort_field: str | None = None
    sort_dir: SortDirection = SortDirection.ASC


@dataclass(slots=True, frozen=True)
class PaginatedResult[T]:
    """One page of a search.

    Attributes:
        items: Rows on this page, never more than ``limit``.
        total_count: Rows matching the filters, across all pages.
        limit: Effective page size.
        next_cursor: Continuation token (CURSOR mode, only when more rows follow).
        current_offset: Offset of this page (OFFSET mode, only when > 0).
        has_next_page: Whether another page follows.
        has_previous_page: Whether a page precedes this one.
        available_sort_fields: Sort fields the search accepts (OFFSET mode).
    """

    items: Sequence[T]
    total_count: int
    limit: int
    next_cursor: str | None = None
    current_offset: int | None = None
    has_next_page: bool = False
    has_previous_page: bool = False
    available_sort_fields: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "PaginatedResult",
    "PaginationOptions",
    "PaginationType",
    "ResolvedOptions",
    "SortDirection",
]
