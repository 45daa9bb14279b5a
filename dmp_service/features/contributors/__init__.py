"""Project contributors and their roles."""

from __future__ import annotations

from .models import CONTRIBUTOR_ROLES, ContributorRole, ProjectContributor, project_contributor_roles
from .repository import (
    ContributorRoleRepository,
    ProjectContributorRepository,
    get_contributor_role_repository,
    get_project_contributor_repository,
)
from .schemas import ContributorCreate, ContributorUpdate
from .service import ROLES_FIELD, ContributorRoleAssociation, ContributorService

__all__ = [
    "CONTRIBUTOR_ROLES",
    "ROLES_FIELD",
    "ContributorCreate",
    "ContributorRole",
    "ContributorRoleAssociation",
    "ContributorRoleRepository",
    "ContributorService",
    "ContributorUpdate",
    "ProjectContributor",
    "ProjectContributorRepository",
    "get_contributor_role_repository",
    "get_project_contributor_repository",
    "project_contributor_roles",
]
