"""Exception handlers rendering errors as RFC 7807 problem documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dmp_service.core.database.exceptions import InvalidFilterError, NotFoundError, RepositoryError
from dmp_service.core.exceptions import AppException
from dmp_service.core.schemas import FieldError, ProblemDetail, ValidationProblemDetail
from dmp_service.infra.logging import get_log_context

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    type_: str,
    title: str | None = None,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    problem = ProblemDetail(
        type=type_,
        title=title or AppException._default_title(status_code),
        status=status_code,
        detail=detail,
        instance=str(request.url),
    )
    content = problem.model_dump(exclude_none=True)
    if extra:
        content.update(extra)

    request_id = get_log_context().get("request_id")
    if request_id:
        content["request_id"] = request_id

    return JSONResponse(status_code=status_code, content=content, media_type=PROBLEM_JSON)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render ``AppException`` subclasses, pagination errors included."""
    logger.warning(
        "Application exception occurred",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )
    return _problem_response(
        request,
        exc.status_code,
        exc.detail,
        exc.type,
        title=exc.title,
        extra=exc.extra,
    )


async def repository_exception_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Render repository errors; a missing entity is a 404, a bad search filter a 400."""
    if isinstance(exc, NotFoundError):
        logger.info(
            "Entity not found",
            extra={"path": request.url.path, "entity": exc.model_name},
        )
        return _problem_response(
            request,
            status.HTTP_404_NOT_FOUND,
            exc.message,
            "not-found",
            extra={"entity": exc.model_name},
        )

    if isinstance(exc, InvalidFilterError):
        logger.info(
            "Invalid search filter",
            extra={"path": request.url.path, "detail": exc.message},
        )
        return _problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            exc.message,
            "invalid-filter",
            extra=exc.details,
        )

    logger.error(
        "Repository error",
        extra={"path": request.url.path, "detail": str(exc)},
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred while processing your request",
        "internal-error",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors with one entry per invalid field."""
    errors = [
        FieldError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            type=error["type"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "method": request.method, "error_count": len(errors)},
    )

    problem = ValidationProblemDetail(
        type="validation-error",
        title="Validation Error",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Request validation failed for {len(errors)} field(s)",
        instance=str(request.url),
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(mode="json", exclude_none=True),
        media_type=PROBLEM_JSON,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the problem-document handlers on ``app``."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepositoryError, repository_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]


__all__ = [
    "app_exception_handler",
    "register_exception_handlers",
    "repository_exception_handler",
    "validation_exception_handler",
]
