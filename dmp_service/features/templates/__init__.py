"""Plan templates and their published versions."""

from __future__ import annotations

from .models import Template, TemplateVersionType, TemplateVisibility, VersionedTemplate
from .repository import (
    TemplateRepository,
    VersionedTemplateRepository,
    get_template_repository,
    get_versioned_template_repository,
)
from .schemas import TemplateSearchResponse, TemplateSearchResult

__all__ = [
    "Template",
    "TemplateRepository",
    "TemplateSearchResponse",
    "TemplateSearchResult",
    "TemplateVersionType",
    "TemplateVisibility",
    "VersionedTemplate",
    "VersionedTemplateRepository",
    "get_template_repository",
    "get_versioned_template_repository",
]
