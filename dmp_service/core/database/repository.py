"""Minimal generic repository for SQLAlchemy models.

Provides basic CRUD plus dual-mode paginated search, with explicit session
passing. For complex queries, use the session directly.

Example:
    from dmp_service.core.database import BaseRepository
    from dmp_service.features.licenses.models import License

    class LicenseRepository(BaseRepository[License]):
        async def search(self, session, *, term=None, options=None):
            stmt = SearchFilter([License.name, License.description], term).apply(select(License))
            query = PaginatedQuery.for_model(stmt, License, default="name", sortable=...)
            return await self.paginate(session, query, options)

    repo = LicenseRepository(License)
    page = await repo.search(session, term="cc", options=PaginationOptions(limit=10))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from dmp_service.core.database.exceptions import NotFoundError
from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedQuery, PaginatedResult, PaginationOptions
    from dmp_service.core.settings import PaginationSettings


class BaseRepository[T]:
    """Minimal generic repository.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - get_many(session, ids) -> Sequence[T]
        - create(session, instance) -> T
        - update(session, instance) -> T
        - delete(session, instance) -> None
        - paginate(session, query, options) -> PaginatedResult[T]

    Session is always explicit; the repository holds no connection state.
    """

    __slots__ = ("model", "_logger", "_lazy", "_pagination_settings")

    def __init__(self, model: type[T], *, pagination_settings: PaginationSettings | None = None) -> None:
        """Initialize repository with model class.

        Args:
            model: SQLAlchemy model class (e.g., License, Template)
            pagination_settings: Overrides the cached ``PaginationSettings``
        """
        self.model = model
        self._pagination_settings = pagination_settings
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T | None:
        """Get entity by primary key.

        Args:
            session: Database session
            id: Primary key value
            options: SQLAlchemy loader options (e.g., selectinload)
        """
        if options:
            stmt = select(self.model).where(self._pk_attr() == id).options(*options)
            result = await session.execute(stmt)
            instance = result.scalar_one_or_none()
        else:
            instance = await session.get(self.model, id)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T:
        """Get entity by primary key or raise NotFoundError.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        instance = await self.get(session, id, options=options)
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def get_many(self, session: AsyncSession, ids: Iterable[Any]) -> Sequence[T]:
        """Get entities by primary key, silently skipping missing ids."""
        id_list = list(ids)
        if not id_list:
            return []

        stmt = select(self.model).where(self._pk_attr().in_(id_list))
        result = await session.execute(stmt)
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.get_many: {self.model.__name__}({len(id_list)} ids) -> {len(items)} found"
        )
        return items

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity.

        Adds to session, flushes to get generated values (like id),
        and refreshes to ensure instance is up-to-date.
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def update(self, session: AsyncSession, instance: T) -> T:
        """Flush changes to a tracked entity and refresh it."""
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.update: {self.model.__name__}(id={entity_id})")
        return instance

    async def delete(self, session: AsyncSession, instance: T) -> None:
        """Delete an entity."""
        entity_id = getattr(instance, "id", None)
        await session.delete(instance)
        await session.flush()

        self._logger.info(
            "Entity deleted",
            extra={"entity": self.model.__name__, "id": str(entity_id), "operation": "db.delete"},
        )

    async def paginate(
        self,
        session: AsyncSession,
        query: PaginatedQuery[T],
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[T]:
        """Run ``query`` through the pagination engine on ``session``.

        Raises:
            InvalidPaginationOptionsError: If the options are invalid.
            InvalidCursorError: If the cursor cannot be used with this query.
        """
        from dmp_service.core.pagination import PaginationEngine, SqlAlchemyPageFetcher

        engine = PaginationEngine(
            SqlAlchemyPageFetcher(session),
            settings=self._pagination_settings,
        )
        page = await engine.paginate(query, options)

        self._lazy.debug(
            lambda: f"db.paginate: {self.model.__name__} -> {len(page.items)}/{page.total_count} items"
        )
        return page

    def _pk_attr(self) -> Any:
        return self.model.id  # type: ignore[attr-defined]


__all__ = ["BaseRepository"]
