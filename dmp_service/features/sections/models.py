"""SQLAlchemy models for the sections feature."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class Section(Base, IntegerPKMixin, TimestampMixin):
    """Ordered section of a template."""

    __tablename__ = "sections"

    template_id: Mapped[int] = mapped_column(
        ForeignKey("templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    introduction: Mapped[str | None] = mapped_column(Text, nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Section(id={self.id}, template_id={self.template_id}, name={self.name!r})>"
