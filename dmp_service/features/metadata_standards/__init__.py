"""Metadata standards for research outputs."""

from __future__ import annotations

from .models import (
    OUTPUT_METADATA_STANDARDS,
    MetadataStandard,
    metadata_standard_research_domains,
    output_metadata_standards,
)
from .repository import MetadataStandardRepository, get_metadata_standard_repository

__all__ = [
    "OUTPUT_METADATA_STANDARDS",
    "MetadataStandard",
    "MetadataStandardRepository",
    "get_metadata_standard_repository",
    "metadata_standard_research_domains",
    "output_metadata_standards",
]
