"""Shared response schemas (RFC 7807 Problem Details)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProblemDetail(BaseModel):
    """RFC 7807 problem document.

    Example:
        {"type": "invalid-cursor", "title": "Bad Request", "status": 400,
         "detail": "Invalid cursor, restart from the first page"}
    """

    type: str = Field(default="about:blank", description="Problem type identifier")
    title: str = Field(description="Short summary of the problem type")
    status: int = Field(ge=100, le=599, description="HTTP status code")
    detail: str | None = Field(default=None, description="Explanation of this occurrence")
    instance: str | None = Field(default=None, description="URI of this occurrence")


class FieldError(BaseModel):
    """One invalid request field."""

    field: str
    message: str
    type: str
    value: Any = None


class ValidationProblemDetail(ProblemDetail):
    """Problem document listing invalid request fields."""

    errors: list[FieldError] = Field(default_factory=list)


__all__ = ["FieldError", "ProblemDetail", "ValidationProblemDetail"]
