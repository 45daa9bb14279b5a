"""SQLAlchemy models for the affiliations feature."""

from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class Affiliation(Base, IntegerPKMixin, TimestampMixin):
    """Institution, organization or funder a user or plan belongs to.

    ``uri`` (typically a ROR id) is the stable external identifier; templates
    record their owner by this URI.
    """

    __tablename__ = "affiliations"

    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    acronyms: Mapped[str | None] = mapped_column(Text, nullable=True)
    funder: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Affiliation(id={self.id}, uri={self.uri!r})>"
