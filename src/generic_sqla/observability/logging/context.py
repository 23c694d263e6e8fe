"""Observability – context-scoped logger.

The repository never builds a logger of its own: it asks the current
context for one. A caller (HTTP middleware, job runner, test) binds a
structlog logger for the duration of a unit of work::

    log = structlog.get_logger("orders").bind(request_id=rid)
    async with LoggerContext.scoped(log):
        await repo.detail(42)

``ContextVar`` values follow ``asyncio`` tasks, so the logger travels
with the awaited call chain the same way cancellation does.
"""
from __future__ import annotations

import contextlib
from contextvars import ContextVar, Token
from typing import Any, AsyncIterator

import structlog

DEFAULT_LOGGER_NAME = "generic_sqla"

_LOGGER_VAR: ContextVar[Any | None] = ContextVar("x-logger-ctx", default=None)


class LoggerContext:
    """Context-variable holder for the active structlog logger."""

    @staticmethod
    def set(logger: Any) -> Token[Any | None]:
        return _LOGGER_VAR.set(logger)

    @staticmethod
    def get() -> Any | None:
        return _LOGGER_VAR.get()

    @staticmethod
    def reset(token: Token[Any | None]) -> None:
        _LOGGER_VAR.reset(token)

    @staticmethod
    @contextlib.asynccontextmanager
    async def scoped(logger: Any) -> AsyncIterator[Any]:
        token = _LOGGER_VAR.set(logger)
        try:
            yield logger
        finally:
            _LOGGER_VAR.reset(token)


def get_logger_from_context() -> Any:
    """Return the logger bound to the current context.

    Falls back to ``structlog.get_logger("generic_sqla")``; values bound via
    ``structlog.contextvars`` still reach its output when the
    ``merge_contextvars`` processor is configured.
    """
    logger = _LOGGER_VAR.get()
    if logger is not None:
        return logger
    return structlog.get_logger(DEFAULT_LOGGER_NAME)


context_with_logger = LoggerContext.scoped


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LoggerContext",
    "context_with_logger",
    "get_logger_from_context",
]
