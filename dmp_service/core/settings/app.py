"""Application identity settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "stg", "prd", "test"]


class AppSettings(BaseSettings):
    """Service identity and runtime environment.

    Environment variables use APP_ prefix.
    Example: APP_ENVIRONMENT=prd, APP_DEBUG=false
    """

    service_name: str = Field(
        default="dmp-service",
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Service name for logging (lowercase, hyphens allowed)",
    )
    environment: Environment = Field(
        default="dev",
        description="Deployment environment: dev|stg|prd|test",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug behaviour (SQL echo, verbose errors)",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Whether the service runs in the production environment."""
        return self.environment == "prd"
