"""Request-scoped log context backed by contextvars.

Values bound with ``bind_log_context`` are copied onto every log record by
``ContextInjectingFilter``. Each asyncio task sees its own copy, so a search
request's ``request_id`` never leaks into a concurrent request's records.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

_log_context: ContextVar[dict[str, Any]] = ContextVar("dmp_log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the current task's log context.

    Example:
        set_log_context(request_id="abc-123", user_id=42)
        logger.info("Searching templates")  # record carries request_id and user_id
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the current task's log context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Reset the current task's log context."""
    _log_context.set({})


@contextmanager
def bind_log_context(**kwargs: Any) -> Iterator[None]:
    """Temporarily add fields to the log context.

    The previous context is restored on exit, even when the block raises.

    Example:
        with bind_log_context(contributor_id=7):
            await service.update_contributor(...)
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    token = _log_context.set(current)
    try:
        yield
    finally:
        _log_context.reset(token)


class ContextInjectingFilter(logging.Filter):
    """Copy log context fields onto each record.

    Existing record attributes are never overwritten, so an explicit
    ``extra={"request_id": ...}`` wins over the bound context.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
