"""SQLAlchemy models for the users feature."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from dmp_service.core.database import Base, IntegerPKMixin, TimestampMixin


class UserRole(StrEnum):
    RESEARCHER = "RESEARCHER"
    ADMIN = "ADMIN"
    SUPERADMIN = "SUPERADMIN"


class User(Base, IntegerPKMixin, TimestampMixin):
    """Registered user of the authoring tool."""

    __tablename__ = "users"

    given_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    sur_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[str] = mapped_column(String(16), default=UserRole.RESEARCHER, nullable=False)
    affiliation_id: Mapped[int | None] = mapped_column(
        ForeignKey("affiliations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
