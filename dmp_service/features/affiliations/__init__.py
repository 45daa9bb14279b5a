"""Affiliations (institutions and funders)."""

from __future__ import annotations

from .models import Affiliation
from .repository import AffiliationRepository, get_affiliation_repository

__all__ = ["Affiliation", "AffiliationRepository", "get_affiliation_repository"]
