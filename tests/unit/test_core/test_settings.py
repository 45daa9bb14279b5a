"""Unit tests for settings and cached loaders."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dmp_service.core.settings import (
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    PaginationSettings,
    get_pagination_settings,
)


class TestPaginationSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PAGINATION_CURSOR_SECRET", raising=False)

        settings = PaginationSettings()

        assert settings.default_limit == 20
        assert settings.max_limit == 100
        assert settings.default_type == "OFFSET"
        assert settings.cursor_secret.get_secret_value()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_DEFAULT_LIMIT", "5")
        monkeypatch.setenv("PAGINATION_DEFAULT_TYPE", "CURSOR")
        monkeypatch.setenv("PAGINATION_CURSOR_SECRET", "from-env")

        settings = PaginationSettings()

        assert settings.default_limit == 5
        assert settings.default_type == "CURSOR"
        assert settings.cursor_secret.get_secret_value() == "from-env"

    def test_secret_hidden_from_repr(self):
        settings = PaginationSettings(cursor_secret="hunter2")

        assert "hunter2" not in repr(settings)

    def test_default_limit_cannot_exceed_max(self):
        with pytest.raises(ValidationError, match="default_limit"):
            PaginationSettings(default_limit=50, max_limit=10)

    def test_unknown_default_type_rejected(self):
        with pytest.raises(ValidationError):
            PaginationSettings(default_type="PAGES")

    def test_frozen(self):
        settings = PaginationSettings()

        with pytest.raises(ValidationError):
            settings.max_limit = 5

    def test_loader_is_cached(self, monkeypatch):
        first = get_pagination_settings()
        monkeypatch.setenv("PAGINATION_MAX_LIMIT", "7")

        assert get_pagination_settings() is first

        get_pagination_settings.cache_clear()
        assert get_pagination_settings().max_limit == 7


class TestOtherSettings:
    def test_database_sqlite_detection(self):
        assert DatabaseSettings(url="sqlite+aiosqlite://").is_sqlite
        assert not DatabaseSettings(url="postgresql+psycopg://u:p@db/dmp").is_sqlite

    def test_database_url_is_secret(self):
        settings = DatabaseSettings(url="postgresql+psycopg://u:secret@db/dmp")

        assert "secret@" not in repr(settings)

    def test_logging_kwargs(self):
        kwargs = LoggingSettings(level="DEBUG", json_logs=False).to_logging_kwargs()

        assert kwargs["log_level"] == "DEBUG"
        assert kwargs["json_logs"] is False
        assert kwargs["static_fields"] == {"service": "dmp-service"}

    def test_app_environment(self, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "prd")

        assert AppSettings().is_production

    def test_app_service_name_pattern(self):
        with pytest.raises(ValidationError):
            AppSettings(service_name="Not Valid")
