"""SQLAlchemy models for the templates feature."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import AuditColumnsMixin, Base, IntegerPKMixin, TimestampMixin


class TemplateVisibility(StrEnum):
    ORGANIZATION = "ORGANIZATION"
    PUBLIC = "PUBLIC"


class TemplateVersionType(StrEnum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class Template(Base, IntegerPKMixin, TimestampMixin, AuditColumnsMixin):
    """Plan template owned by an affiliation.

    ``owner_id`` holds the owning affiliation's URI.
    """

    __tablename__ = "templates"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    visibility: Mapped[str] = mapped_column(
        String(16), default=TemplateVisibility.ORGANIZATION, nullable=False
    )
    latest_published_version: Mapped[str | None] = mapped_column(String(16), nullable=True)
    is_dirty: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    best_practice: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Template(id={self.id}, name={self.name!r})>"


class VersionedTemplate(Base, IntegerPKMixin, TimestampMixin, AuditColumnsMixin):
    """Snapshot of a template taken when it is published."""

    __tablename__ = "versioned_templates"

    template_id: Mapped[int] = mapped_column(
        ForeignKey("templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version: Mapped[str] = mapped_column(String(16), nullable=False)
    version_type: Mapped[str] = mapped_column(
        String(16), default=TemplateVersionType.PUBLISHED, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    visibility: Mapped[str] = mapped_column(
        String(16), default=TemplateVisibility.ORGANIZATION, nullable=False
    )
    best_practice: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<VersionedTemplate(id={self.id}, template_id={self.template_id}, version={self.version!r})>"
