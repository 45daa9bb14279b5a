"""Pagination request errors.

Both are request-validation failures: callers are expected to fix the input
or, for a bad cursor, start over from the first page.
"""

from __future__ import annotations

from typing import Any

from dmp_service.core.exceptions import BadRequestException


class InvalidPaginationOptionsError(BadRequestException):
    """limit <= 0, offset < 0, or an unknown sort direction / pagination type."""

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        super().__init__(detail=detail, type="invalid-pagination-options", extra=extra)


class InvalidCursorError(BadRequestException):
    """Cursor is malformed, tampered with, or was issued for another ordering."""

    def __init__(
        self,
        detail: str = "Invalid cursor, restart from the first page",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="invalid-cursor", extra=extra)


__all__ = ["InvalidCursorError", "InvalidPaginationOptionsError"]
