"""Licenses for research outputs."""

from __future__ import annotations

from .models import License
from .repository import LicenseRepository, get_license_repository

__all__ = ["License", "LicenseRepository", "get_license_repository"]
