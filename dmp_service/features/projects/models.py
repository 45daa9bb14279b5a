"""SQLAlchemy models for the projects feature."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Column, Date, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import AuditColumnsMixin, Base, IntegerPKMixin, TimestampMixin

# Users invited to a project they did not create
project_collaborators = Table(
    "project_collaborators",
    Base.metadata,
    Column(
        "project_id",
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("access_level", String(16), nullable=False, default="COMMENT"),
)


class Project(Base, IntegerPKMixin, TimestampMixin, AuditColumnsMixin):
    """Research project that plans are written for."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    abstract_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    research_domain_id: Mapped[int | None] = mapped_column(
        ForeignKey("research_domains.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_test_project: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title={self.title!r})>"
