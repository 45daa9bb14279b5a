"""SQLAlchemy models for the research outputs feature."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import AuditColumnsMixin, Base, IntegerPKMixin, TimestampMixin


class ResearchOutput(Base, IntegerPKMixin, TimestampMixin, AuditColumnsMixin):
    """Dataset, software or other output a project plans to produce.

    Repositories and metadata standards are linked through the
    ``research_output_repositories`` and ``research_output_metadata_standards``
    tables owned by those features.
    """

    __tablename__ = "research_outputs"

    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_type: Mapped[str] = mapped_column(String(64), nullable=False, default="DATASET")

    def __repr__(self) -> str:
        return f"<ResearchOutput(id={self.id}, title={self.title!r})>"
