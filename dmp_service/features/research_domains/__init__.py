"""Research domains."""

from __future__ import annotations

from .models import ResearchDomain
from .repository import ResearchDomainRepository, get_research_domain_repository

__all__ = ["ResearchDomain", "ResearchDomainRepository", "get_research_domain_repository"]
