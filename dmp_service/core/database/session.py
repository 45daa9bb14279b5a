"""Async engine and session factory.

``Database`` is constructed from ``DatabaseSettings`` and passed to whatever
needs sessions; there is no module-level engine.

Example:
    db = Database(get_db_settings())
    async with db.session() as session:
        page = await license_repo.search(session, term="cc")
    await db.dispose()
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from dmp_service.core.database.base import Base

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncEngine

    from dmp_service.core.settings import DatabaseSettings

logger = logging.getLogger(__name__)


def _configure_sqlite(engine: AsyncEngine) -> None:
    """Enforce foreign keys and let SQLAlchemy emit BEGIN so SAVEPOINTs work."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        _ = connection_record
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")


class Database:
    """Owns one async engine and its session factory."""

    def __init__(self, settings: DatabaseSettings) -> None:
        engine_kwargs: dict[str, Any] = {"echo": settings.echo}
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
                pool_timeout=settings.pool_timeout,
                pool_pre_ping=settings.pool_pre_ping,
            )

        self.engine: AsyncEngine = create_async_engine(settings.url.get_secret_value(), **engine_kwargs)
        if settings.is_sqlite:
            _configure_sqlite(self.engine)
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.debug("Database engine created", extra={"dialect": self.engine.dialect.name})

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session that commits on success and rolls back on error."""
        async with self.sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every mapped table (tests and local development)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.debug("Database engine disposed")


__all__ = ["Database"]
