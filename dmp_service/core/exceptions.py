"""Application exception hierarchy (RFC 7807 Problem Details)."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (RFC 7807 ``type``).
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information.

    Example:
        raise AppException(
            status_code=404,
            detail="Template not found",
            type="template-not-found",
            extra={"template_id": 12},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        titles = {
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")


class BadRequestException(AppException):
    """Request could not be processed as sent.

    Example:
        raise BadRequestException(
            detail="sortDir must be ASC or DESC",
            type="invalid-sort-direction",
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            extra=extra,
        )


__all__ = [
    "AppException",
    "BadRequestException",
]
