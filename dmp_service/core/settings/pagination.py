"""Pagination settings for search operations.

Centralizes the default and maximum page sizes shared by every search, the
fallback pagination mode, and the secret used to sign cursor tokens.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=20, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size used when a request omits ``limit``.
        max_limit: Hard ceiling; larger requested limits are clamped to it.
        default_type: Mode used when a request names neither a type, a
            cursor, nor an offset.
        cursor_secret: HMAC key for cursor tokens. Rotating it invalidates
            every outstanding cursor.

    Example:
        settings = PaginationSettings()
        limit = min(requested_limit, settings.max_limit)
    """

    default_limit: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Default page size when limit not specified",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )
    default_type: Literal["CURSOR", "OFFSET"] = Field(
        default="OFFSET",
        description="Pagination mode when the request gives no hint",
    )
    cursor_secret: SecretStr = Field(
        default=SecretStr("change-me-in-production"),
        description="HMAC key used to sign cursor tokens",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = "default_limit must not exceed max_limit"
            raise ValueError(msg)
        return self
