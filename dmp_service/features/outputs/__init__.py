"""Research outputs and their repository/metadata-standard links."""

from __future__ import annotations

from .models import ResearchOutput
from .repository import ResearchOutputRepository, get_research_output_repository
from .schemas import ResearchOutputCreate, ResearchOutputUpdate
from .service import (
    METADATA_STANDARDS_FIELD,
    REPOSITORIES_FIELD,
    OutputAssociation,
    ResearchOutputService,
)

__all__ = [
    "METADATA_STANDARDS_FIELD",
    "REPOSITORIES_FIELD",
    "OutputAssociation",
    "ResearchOutput",
    "ResearchOutputCreate",
    "ResearchOutputRepository",
    "ResearchOutputService",
    "ResearchOutputUpdate",
    "get_research_output_repository",
]
