"""Observability – context-scoped structured logging."""
from generic_sqla.observability.logging.context import (
    DEFAULT_LOGGER_NAME,
    LoggerContext,
    context_with_logger,
    get_logger_from_context,
)
from generic_sqla.observability.logging.factory import LoggerFactory, configure_logging

__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LoggerContext",
    "LoggerFactory",
    "configure_logging",
    "context_with_logger",
    "get_logger_from_context",
]
