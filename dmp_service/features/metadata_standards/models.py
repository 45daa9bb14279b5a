"""SQLAlchemy models for the metadata standards feature."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.associations import AssociationLink
from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin

# Many-to-many association table for metadata standards <-> research domains
metadata_standard_research_domains = Table(
    "metadata_standard_research_domains",
    Base.metadata,
    Column(
        "metadata_standard_id",
        ForeignKey("metadata_standards.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "research_domain_id",
        ForeignKey("research_domains.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

# Many-to-many association table for research outputs <-> metadata standards
output_metadata_standards = Table(
    "research_output_metadata_standards",
    Base.metadata,
    Column(
        "research_output_id",
        ForeignKey("research_outputs.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "metadata_standard_id",
        ForeignKey("metadata_standards.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

OUTPUT_METADATA_STANDARDS = AssociationLink(
    output_metadata_standards,
    parent_column="research_output_id",
    child_column="metadata_standard_id",
)


class MetadataStandard(Base, IntegerPKMixin, TimestampMixin):
    """Metadata standard a research output can follow (e.g. Dublin Core)."""

    __tablename__ = "metadata_standards"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Comma separated keywords",
    )

    def __repr__(self) -> str:
        return f"<MetadataStandard(id={self.id}, name={self.name!r})>"
