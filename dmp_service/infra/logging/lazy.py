"""Lazily evaluated debug logging.

Repositories and the pagination engine log a line per query at DEBUG. Those
messages interpolate counts and cursors, so they are passed as lambdas and
only built when DEBUG is enabled for the logger.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any


class LazyLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that evaluates callable messages and args on demand.

    Example:
        logger = get_lazy_logger(__name__)
        logger.debug(lambda: f"fetched {len(rows)} rows after {cursor!r}")
    """

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if not self.isEnabledFor(level):
            return

        if callable(msg):
            msg = msg()
        if args:
            args = tuple(arg() if callable(arg) else arg for arg in args)

        super().log(level, msg, *args, **kwargs)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)


def get_lazy_logger(name: str, **context: Any) -> LazyLoggerAdapter:
    """Get a logger whose messages may be zero-argument callables.

    Args:
        name: Logger name (usually ``__name__``).
        **context: Fields bound to every record from this adapter.
    """
    return LazyLoggerAdapter(logging.getLogger(name), context or {})


class LazyString:
    """String whose value is computed only when formatted.

    Example:
        logger.debug("options: %s", LazyString(lambda: options.model_dump()))
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func

    def __str__(self) -> str:
        return str(self._func())

    def __repr__(self) -> str:
        return f"LazyString({self._func!r})"
