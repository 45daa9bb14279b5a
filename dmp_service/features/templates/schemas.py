"""Result types for the templates feature."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from pydantic import Field

from dmp_service.core.pagination import PaginatedResponse, PaginatedResult

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(slots=True, frozen=True)
class TemplateSearchResult[T](PaginatedResult[T]):
    """Template search page plus facets over the term matches.

    Attributes:
        available_affiliations: Owner URIs of every template matching the
            search term, before the owner and best-practice filters.
        has_best_practice_templates: Whether any template matching the
            search term is a best-practice template.
    """

    available_affiliations: tuple[str, ...] = ()
    has_best_practice_templates: bool = False

    @classmethod
    def from_page(
        cls,
        page: PaginatedResult[T],
        *,
        available_affiliations: tuple[str, ...],
        has_best_practice_templates: bool,
    ) -> TemplateSearchResult[T]:
        values = {f.name: getattr(page, f.name) for f in fields(PaginatedResult)}
        return cls(
            **values,
            available_affiliations=available_affiliations,
            has_best_practice_templates=has_best_practice_templates,
        )


class TemplateSearchResponse[T](PaginatedResponse[T]):
    """Paginated template response with ``availableAffiliations`` and ``hasBestPracticeTemplates``."""

    available_affiliations: list[str] = Field(default_factory=list)
    has_best_practice_templates: bool = False

    @classmethod
    def from_template_result(
        cls,
        result: TemplateSearchResult[Any],
        convert: Callable[[Any], T] | None = None,
    ) -> TemplateSearchResponse[T]:
        return cls.from_result(
            result,
            convert,
            available_affiliations=list(result.available_affiliations),
            has_best_practice_templates=result.has_best_practice_templates,
        )  # type: ignore[return-value]


__all__ = ["TemplateSearchResponse", "TemplateSearchResult"]
