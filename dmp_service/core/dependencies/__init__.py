"""FastAPI dependencies."""

from dmp_service.core.dependencies.pagination import PaginationQuery, get_pagination_options

__all__ = ["PaginationQuery", "get_pagination_options"]
