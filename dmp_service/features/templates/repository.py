"""Repositories for the templates feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from dmp_service.core.database import (
    BaseRepository,
    BooleanFilter,
    CollectionFilter,
    SearchFilter,
    apply_filters,
)
from dmp_service.core.pagination import PaginatedQuery
from dmp_service.features.templates.models import (
    Template,
    TemplateVersionType,
    VersionedTemplate,
)
from dmp_service.features.templates.schemas import TemplateSearchResult

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from dmp_service.core.pagination import PaginationOptions


async def _facets(session: AsyncSession, stmt: Select[Any]) -> tuple[tuple[str, ...], bool]:
    """Owner URIs and best-practice presence across every row ``stmt`` matches."""
    matches = stmt.subquery()
    owners = await session.execute(select(matches.c.owner_id).distinct().order_by(matches.c.owner_id))
    best_practice = await session.execute(
        select(matches.c.id).where(matches.c.best_practice.is_(True)).limit(1)
    )
    return tuple(owners.scalars().all()), best_practice.first() is not None


def _owner_uris(options: PaginationOptions | None) -> list[str] | None:
    if options is None or not options.select_owner_uris:
        return None
    return list(options.select_owner_uris)


def _best_practice_only(options: PaginationOptions | None) -> bool | None:
    return True if options is not None and options.best_practice else None


class TemplateRepository(BaseRepository[Template]):
    """Repository for Template model."""

    def __init__(self) -> None:
        super().__init__(Template)

    async def search(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        options: PaginationOptions | None = None,
    ) -> TemplateSearchResult[Template]:
        """Search templates by name or description.

        ``options.best_practice`` keeps only best-practice templates and
        ``options.select_owner_uris`` keeps only templates owned by those
        affiliations. Default order: name ASC.
        """
        term_stmt = SearchFilter([Template.name, Template.description], term).apply(select(Template))
        stmt = apply_filters(
            term_stmt,
            BooleanFilter(Template.best_practice, _best_practice_only(options)),
            CollectionFilter(Template.owner_id, _owner_uris(options)),
        )
        query = PaginatedQuery.for_model(
            stmt,
            Template,
            default="name",
            sortable={
                "name": Template.name,
                "created": Template.created_at,
                "modified": Template.updated_at,
                "bestPractice": Template.best_practice,
            },
        )
        page = await self.paginate(session, query, options)
        affiliations, has_best_practice = await _facets(session, term_stmt)

        self._lazy.debug(
            lambda: f"db.search(term={term!r}) -> {page.total_count} matches, {len(affiliations)} owners"
        )
        return TemplateSearchResult.from_page(
            page,
            available_affiliations=affiliations,
            has_best_practice_templates=has_best_practice,
        )


class VersionedTemplateRepository(BaseRepository[VersionedTemplate]):
    """Repository for published template versions."""

    def __init__(self) -> None:
        super().__init__(VersionedTemplate)

    async def search_published(
        self,
        session: AsyncSession,
        *,
        term: str | None = None,
        options: PaginationOptions | None = None,
    ) -> TemplateSearchResult[VersionedTemplate]:
        """Search the active published version of each template.

        Same filters and facets as ``TemplateRepository.search``.
        """
        term_stmt = apply_filters(
            select(VersionedTemplate).where(
                VersionedTemplate.active.is_(True),
                VersionedTemplate.version_type == TemplateVersionType.PUBLISHED,
            ),
            SearchFilter([VersionedTemplate.name, VersionedTemplate.description], term),
        )
        stmt = apply_filters(
            term_stmt,
            BooleanFilter(VersionedTemplate.best_practice, _best_practice_only(options)),
            CollectionFilter(VersionedTemplate.owner_id, _owner_uris(options)),
        )
        query = PaginatedQuery.for_model(
            stmt,
            VersionedTemplate,
            default="name",
            sortable={
                "name": VersionedTemplate.name,
                "created": VersionedTemplate.created_at,
                "bestPractice": VersionedTemplate.best_practice,
                "version": VersionedTemplate.version,
            },
        )
        page = await self.paginate(session, query, options)
        affiliations, has_best_practice = await _facets(session, term_stmt)

        return TemplateSearchResult.from_page(
            page,
            available_affiliations=affiliations,
            has_best_practice_templates=has_best_practice,
        )


# Factory functions for dependency injection
_template_repository: TemplateRepository | None = None
_versioned_template_repository: VersionedTemplateRepository | None = None


def get_template_repository() -> TemplateRepository:
    """Get TemplateRepository instance."""
    global _template_repository
    if _template_repository is None:
        _template_repository = TemplateRepository()
    return _template_repository


def get_versioned_template_repository() -> VersionedTemplateRepository:
    """Get VersionedTemplateRepository instance."""
    global _versioned_template_repository
    if _versioned_template_repository is None:
        _versioned_template_repository = VersionedTemplateRepository()
    return _versioned_template_repository
