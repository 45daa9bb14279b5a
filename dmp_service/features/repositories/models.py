"""SQLAlchemy models for the repositories feature.

"Repository" here is a data repository where research outputs are deposited
(e.g. Zenodo, Dryad), not the data-access class.
"""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.associations import AssociationLink
from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class RepositoryType(StrEnum):
    DISCIPLINARY = "DISCIPLINARY"
    GENERALIST = "GENERALIST"
    GOVERNMENTAL = "GOVERNMENTAL"
    INSTITUTIONAL = "INSTITUTIONAL"
    OTHER = "OTHER"


# Many-to-many association table for research outputs <-> repositories
output_repositories = Table(
    "research_output_repositories",
    Base.metadata,
    Column(
        "research_output_id",
        ForeignKey("research_outputs.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "repository_id",
        ForeignKey("repositories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

OUTPUT_REPOSITORIES = AssociationLink(
    output_repositories,
    parent_column="research_output_id",
    child_column="repository_id",
)


class Repository(Base, IntegerPKMixin, TimestampMixin):
    """Data repository a research output can be deposited in."""

    __tablename__ = "repositories"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    keywords: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Comma separated keywords",
    )
    repository_type: Mapped[str] = mapped_column(
        String(32),
        default=RepositoryType.OTHER,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Repository(id={self.id}, name={self.name!r})>"
