"""Template sections."""

from __future__ import annotations

from .models import Section
from .repository import SectionRepository, get_section_repository

__all__ = ["Section", "SectionRepository", "get_section_repository"]
