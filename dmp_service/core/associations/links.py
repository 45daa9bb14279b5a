"""Per-id operations on many-to-many link tables.

Each write runs inside a SAVEPOINT, so a link that violates a constraint is
rolled back on its own and the caller's session stays usable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError

from dmp_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


@dataclass(slots=True, frozen=True)
class AssociationLink:
    """A link table joining a parent to related records.

    Example:
        contributor_roles = AssociationLink(
            project_contributor_roles,
            parent_column="project_contributor_id",
            child_column="contributor_role_id",
        )
        await contributor_roles.add(session, contributor.id, role.id)
    """

    table: Table
    parent_column: str
    child_column: str

    @property
    def name(self) -> str:
        return self.table.name

    async def current_ids(self, session: AsyncSession, parent_id: Any) -> list[Any]:
        """Ids linked to ``parent_id``, in ascending order."""
        child = self.table.c[self.child_column]
        stmt = select(child).where(self.table.c[self.parent_column] == parent_id).order_by(child)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, session: AsyncSession, parent_id: Any, child_id: Any) -> bool:
        """Link ``child_id`` to ``parent_id``.

        Returns:
            False if the link violates a constraint (duplicate, missing row).
        """
        try:
            async with session.begin_nested():
                await session.execute(
                    insert(self.table).values(
                        {self.parent_column: parent_id, self.child_column: child_id}
                    )
                )
        except IntegrityError as e:
            logger.warning(
                "Link insert rejected",
                extra={
                    "link_table": self.name,
                    "parent_id": str(parent_id),
                    "child_id": str(child_id),
                    "error": str(e.orig),
                },
            )
            return False

        lazy_logger.debug(lambda: f"{self.name}: linked {child_id!r} to {parent_id!r}")
        return True

    async def remove(self, session: AsyncSession, parent_id: Any, child_id: Any) -> bool:
        """Unlink ``child_id`` from ``parent_id``.

        Returns:
            False if no such link existed.
        """
        async with session.begin_nested():
            result = await session.execute(
                delete(self.table).where(
                    self.table.c[self.parent_column] == parent_id,
                    self.table.c[self.child_column] == child_id,
                )
            )

        removed = result.rowcount > 0
        lazy_logger.debug(
            lambda: f"{self.name}: unlink {child_id!r} from {parent_id!r} -> {'ok' if removed else 'missing'}"
        )
        return removed


__all__ = ["AssociationLink"]
