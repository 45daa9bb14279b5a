"""SQLAlchemy models for the contributors feature."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.associations import AssociationLink
from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin

# Many-to-many association table for project contributors <-> contributor roles
project_contributor_roles = Table(
    "project_contributor_roles",
    Base.metadata,
    Column(
        "project_contributor_id",
        ForeignKey("project_contributors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "contributor_role_id",
        ForeignKey("contributor_roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

CONTRIBUTOR_ROLES = AssociationLink(
    project_contributor_roles,
    parent_column="project_contributor_id",
    child_column="contributor_role_id",
)


class ContributorRole(Base, IntegerPKMixin, TimestampMixin):
    """CRediT-style role a contributor plays (e.g. "Data curation")."""

    __tablename__ = "contributor_roles"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<ContributorRole(id={self.id}, label={self.label!r})>"


class ProjectContributor(Base, IntegerPKMixin, TimestampMixin):
    """Person credited on a project."""

    __tablename__ = "project_contributors"

    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    affiliation_id: Mapped[int | None] = mapped_column(
        ForeignKey("affiliations.id", ondelete="SET NULL"),
        nullable=True,
    )
    given_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sur_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    orcid: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<ProjectContributor(id={self.id}, project_id={self.project_id})>"
