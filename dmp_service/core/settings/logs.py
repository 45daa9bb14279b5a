"""Logging configuration settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Structured logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=DEBUG, LOG_JSON_LOGS=false
    """

    service_name: str = Field(
        default="dmp-service",
        description="Service name added as a static field to JSON records",
    )
    level: LogLevel = Field(
        default="INFO",
        description="Root logger level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
    )
    json_logs: bool = Field(
        default=True,
        description="Emit JSON Lines records instead of plain text",
    )
    include_context: bool = Field(
        default=True,
        description="Inject contextvars log context (request_id, user_id) into records",
    )
    file_path: Path | None = Field(
        default=None,
        description="Optional log file; None logs to stderr only",
    )
    capture_warnings: bool = Field(
        default=True,
        description="Route Python warnings through the logging system",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``."""
        return {
            "log_level": self.level,
            "json_logs": self.json_logs,
            "include_context": self.include_context,
            "file_path": self.file_path,
            "capture_warnings": self.capture_warnings,
            "static_fields": {"service": self.service_name},
        }
