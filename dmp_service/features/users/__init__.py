"""Users."""

from __future__ import annotations

from .models import User, UserRole
from .repository import UserRepository, get_user_repository

__all__ = ["User", "UserRepository", "UserRole", "get_user_repository"]
