"""Database layer: declarative base, repository, filters and session factory.

Usage:
    from dmp_service.core.database import BaseRepository, Database, SearchFilter
"""

from dmp_service.core.database.base import (
    NAMING_CONVENTION,
    AuditColumnsMixin,
    Base,
    IntegerPKMixin,
    TimestampMixin,
    utc_now,
)
from dmp_service.core.database.exceptions import InvalidFilterError, NotFoundError, RepositoryError
from dmp_service.core.database.filters import (
    BooleanFilter,
    CollectionFilter,
    EqualityFilter,
    SearchFilter,
    StatementFilter,
    apply_filters,
)
from dmp_service.core.database.repository import BaseRepository
from dmp_service.core.database.session import Database

__all__ = [
    "NAMING_CONVENTION",
    "AuditColumnsMixin",
    "Base",
    "BaseRepository",
    "BooleanFilter",
    "CollectionFilter",
    "Database",
    "EqualityFilter",
    "IntegerPKMixin",
    "InvalidFilterError",
    "NotFoundError",
    "RepositoryError",
    "SearchFilter",
    "StatementFilter",
    "TimestampMixin",
    "apply_filters",
    "utc_now",
]
