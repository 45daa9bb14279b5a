"""Logging infrastructure.

Standard library logging with:
- JSONL output with OpenTelemetry trace correlation
- Automatic context injection (request_id, user_id, ...)
- Lazy DEBUG messages that cost nothing when DEBUG is off

Usage:
    import logging

    from dmp_service.infra.logging import get_lazy_logger, set_log_context

    logger = logging.getLogger(__name__)
    lazy_logger = get_lazy_logger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Contributor updated")
    lazy_logger.debug(lambda: f"delta: {delta}")
"""

from dmp_service.infra.logging.config import configure_logging, setup_logging
from dmp_service.infra.logging.context import (
    ContextInjectingFilter,
    bind_log_context,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from dmp_service.infra.logging.formatters import JSONFormatter
from dmp_service.infra.logging.lazy import LazyLoggerAdapter, LazyString, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "LazyString",
    "bind_log_context",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
