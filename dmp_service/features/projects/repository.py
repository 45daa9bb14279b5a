"""Repository for the projects feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, or_, select

from dmp_service.core.database import BaseRepository, SearchFilter
from dmp_service.core.pagination import PaginatedQuery, SortDirection
from dmp_service.features.projects.models import Project, project_collaborators

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginatedResult, PaginationOptions


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project model."""

    def __init__(self) -> None:
        super().__init__(Project)

    async def search(
        self,
        session: AsyncSession,
        *,
        user_id: Any,
        term: str | None = None,
        options: PaginationOptions | None = None,
    ) -> PaginatedResult[Project]:
        """Search the projects ``user_id`` created or collaborates on.

        Matches title and abstract. Default order: modified DESC.
        """
        collaborating = select(project_collaborators.c.project_id).where(
            project_collaborators.c.user_id == user_id
        )
        stmt = SearchFilter([Project.title, Project.abstract_text], term).apply(
            select(Project).where(
                or_(Project.created_by_id == user_id, Project.id.in_(collaborating))
            )
        )
        query = PaginatedQuery.for_model(
            stmt,
            Project,
            default="modified",
            default_direction=SortDirection.DESC,
            sortable={
                "title": Project.title,
                "created": Project.created_at,
                "modified": Project.updated_at,
                "startDate": Project.start_date,
                "endDate": Project.end_date,
                "isTestProject": Project.is_test_project,
            },
        )
        page = await self.paginate(session, query, options)

        self._lazy.debug(lambda: f"db.search(user_id={user_id}, term={term!r}) -> {page.total_count}")
        return page

    async def add_collaborator(
        self,
        session: AsyncSession,
        project_id: Any,
        user_id: Any,
        *,
        access_level: str = "COMMENT",
    ) -> None:
        """Give ``user_id`` access to a project they did not create."""
        await session.execute(
            insert(project_collaborators).values(
                project_id=project_id, user_id=user_id, access_level=access_level
            )
        )
        self._logger.info(
            "Collaborator added",
            extra={"project_id": str(project_id), "user_id": str(user_id)},
        )


# Factory function for dependency injection
_project_repository: ProjectRepository | None = None


def get_project_repository() -> ProjectRepository:
    """Get ProjectRepository instance."""
    global _project_repository
    if _project_repository is None:
        _project_repository = ProjectRepository()
    return _project_repository
