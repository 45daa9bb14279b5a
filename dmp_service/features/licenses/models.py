"""SQLAlchemy models for the licenses feature."""

from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class License(Base, IntegerPKMixin, TimestampMixin):
    """License a research output can be published under (e.g. CC-BY-4.0)."""

    __tablename__ = "licenses"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    recommended: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<License(id={self.id}, name={self.name!r})>"
