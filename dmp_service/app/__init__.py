"""FastAPI integration: exception handlers."""

from dmp_service.app.exception_handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
