"""Research projects."""

from __future__ import annotations

from .models import Project, project_collaborators
from .repository import ProjectRepository, get_project_repository

__all__ = ["Project", "ProjectRepository", "get_project_repository", "project_collaborators"]
