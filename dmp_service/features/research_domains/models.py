"""SQLAlchemy models for the research domains feature."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class ResearchDomain(Base, IntegerPKMixin, TimestampMixin):
    """Field of research; domains nest under a parent domain."""

    __tablename__ = "research_domains"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_research_domain_id: Mapped[int | None] = mapped_column(
        ForeignKey("research_domains.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ResearchDomain(id={self.id}, name={self.name!r})>"
