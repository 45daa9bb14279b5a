"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated pagination settings
    - Database Fixtures: SQLite-backed ``Database`` and session
    - Utility Fixtures: in-memory page fetcher and sample rows
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import pytest
from pydantic import SecretStr

from dmp_service.core.database import Database
from dmp_service.core.settings import DatabaseSettings, PaginationSettings, clear_settings_cache
from tests.helpers import InMemoryPageFetcher, Row

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.ext.asyncio import AsyncSession

# Ensure tests run without external infrastructure
os.environ.setdefault("DB_URL", "sqlite+aiosqlite://")
os.environ.setdefault("PAGINATION_CURSOR_SECRET", "test-cursor-secret")
os.environ.setdefault("LOG_JSON_LOGS", "false")


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Drop cached settings so environment changes in a test stay local."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    """Small limits so paging behavior shows up with a handful of rows."""
    return PaginationSettings(
        default_limit=2,
        max_limit=5,
        cursor_secret=SecretStr("test-cursor-secret"),
    )


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database]:
    """File-backed SQLite database with every feature table created.

    Yields:
        ``Database`` whose schema is dropped with the temp directory.
    """
    import dmp_service.features  # noqa: F401  registers every table

    db = Database(DatabaseSettings(url=SecretStr(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")))
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Session rolled back after the test."""
    async with database.sessionmaker() as session:
        yield session
        await session.rollback()


# ============================================================================
# Utility Fixtures
# ============================================================================


@pytest.fixture
def fetcher() -> InMemoryPageFetcher:
    return InMemoryPageFetcher()


@pytest.fixture
def abc_rows() -> list[Row]:
    """Three records A, B, C in insertion order."""
    return [Row(id=1, name="A", score=30), Row(id=2, name="B", score=10), Row(id=3, name="C", score=20)]
