"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


class LoggerFactory:
    """Route structlog events through one stdlib root handler.

    Applications call :meth:`configure` once at start-up. The repository
    never configures logging; it only emits ``repository_error`` events
    through whatever logger the context carries.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        json_output: bool = True,
        stream: IO[str] | None = None,
    ) -> None:
        structlog.configure(
            processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
        )
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)


def configure_logging(
    level: int = logging.INFO,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    LoggerFactory.configure(level=level, json_output=json_output, stream=stream)


__all__ = ["LoggerFactory", "configure_logging"]
