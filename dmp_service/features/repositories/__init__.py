"""Data repositories research outputs are deposited in."""

from __future__ import annotations

from .models import OUTPUT_REPOSITORIES, Repository, RepositoryType, output_repositories
from .repository import RepositoryRepository, get_repository_repository

__all__ = [
    "OUTPUT_REPOSITORIES",
    "Repository",
    "RepositoryRepository",
    "RepositoryType",
    "get_repository_repository",
    "output_repositories",
]
