"""dictConfig-based logging setup."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dmp_service.core.settings import LoggingSettings

logger = logging.getLogger(__name__)

_LOGGING_INITIALIZED = False

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(
    log_level: str = "INFO",
    *,
    json_logs: bool = True,
    include_context: bool = True,
    file_path: str | Path | None = None,
    capture_warnings: bool = True,
    static_fields: dict[str, Any] | None = None,
) -> None:
    """Configure the root logger with ``logging.config.dictConfig``.

    All handlers hang off the root logger; ``dmp_service`` loggers propagate.

    Args:
        log_level: Root level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Use ``JSONFormatter`` instead of a plain text format.
        include_context: Attach ``ContextInjectingFilter`` to every handler.
        file_path: Also write records to this file.
        capture_warnings: Forward ``warnings`` to logging.
        static_fields: Fields added to every JSON record (e.g. service name).
    """
    formatter_name = "json" if json_logs else "text"
    handler_filters = ["context"] if include_context else []

    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": formatter_name,
            "filters": handler_filters,
        },
    }
    if file_path is not None:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(path),
            "encoding": "utf-8",
            "formatter": formatter_name,
            "filters": handler_filters,
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "context": {
                    "()": "dmp_service.infra.logging.context.ContextInjectingFilter",
                },
            },
            "formatters": {
                "json": {
                    "()": "dmp_service.infra.logging.formatters.JSONFormatter",
                    "static": static_fields or {},
                },
                "text": {"format": _TEXT_FORMAT},
            },
            "handlers": handlers,
            "root": {"level": log_level, "handlers": list(handlers)},
        }
    )
    logging.captureWarnings(capture_warnings)
    logger.debug("Logging configured", extra={"level": log_level, "json": json_logs})


def setup_logging(log_settings: LoggingSettings | None = None, *, force: bool = False) -> None:
    """Configure logging once per process from ``LoggingSettings``.

    Args:
        log_settings: Settings to use; loaded via ``get_logging_settings`` when omitted.
        force: Reconfigure even if logging was already set up.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from dmp_service.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    configure_logging(**log_settings.to_logging_kwargs())
    _LOGGING_INITIALIZED = True
