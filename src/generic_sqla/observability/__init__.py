"""Observability – logging helpers."""
from generic_sqla.observability.logging import (
    LoggerContext,
    configure_logging,
    context_with_logger,
    get_logger_from_context,
)

__all__ = ["LoggerContext", "configure_logging", "context_with_logger", "get_logger_from_context"]
