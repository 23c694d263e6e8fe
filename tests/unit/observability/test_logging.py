"""Unit tests for observability logging – context logger and LoggerFactory."""

from __future__ import annotations

import asyncio
import io
import json
import logging
from typing import Any

import pytest
import structlog

from generic_sqla.observability.logging import (
    LoggerContext,
    LoggerFactory,
    configure_logging,
    context_with_logger,
    get_logger_from_context,
)


class _RecordingLogger:
    def __init__(self, name: str = "rec") -> None:
        self.name = name
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def error(self, event: str, **kw: Any) -> None:
        self.calls.append((event, kw))


# ---------------------------------------------------------------------------
# LoggerContext
# ---------------------------------------------------------------------------


class TestLoggerContext:
    def test_default_is_empty(self) -> None:
        assert LoggerContext.get() is None

    def test_fallback_logger_when_unset(self) -> None:
        logger = get_logger_from_context()
        assert logger is not None
        assert hasattr(logger, "error")

    def test_set_and_reset(self) -> None:
        rec = _RecordingLogger()
        token = LoggerContext.set(rec)
        try:
            assert get_logger_from_context() is rec
        finally:
            LoggerContext.reset(token)
        assert LoggerContext.get() is None

    def test_scoped_restores_previous(self) -> None:
        async def run() -> None:
            outer, inner = _RecordingLogger("outer"), _RecordingLogger("inner")
            async with LoggerContext.scoped(outer):
                async with context_with_logger(inner) as bound:
                    assert bound is inner
                    assert get_logger_from_context() is inner
                assert get_logger_from_context() is outer
            assert LoggerContext.get() is None

        asyncio.run(run())

    def test_scoped_resets_on_error(self) -> None:
        async def run() -> None:
            with pytest.raises(RuntimeError):
                async with LoggerContext.scoped(_RecordingLogger()):
                    raise RuntimeError("boom")
            assert LoggerContext.get() is None

        asyncio.run(run())

    def test_child_tasks_inherit_logger(self) -> None:
        async def run() -> None:
            rec = _RecordingLogger()

            async def child() -> Any:
                return get_logger_from_context()

            async with LoggerContext.scoped(rec):
                seen = await asyncio.gather(child(), child())
            assert seen == [rec, rec]

        asyncio.run(run())

    def test_sibling_tasks_are_isolated(self) -> None:
        async def run() -> None:
            async def worker(name: str) -> str:
                async with LoggerContext.scoped(_RecordingLogger(name)):
                    await asyncio.sleep(0)
                    return get_logger_from_context().name

            assert await asyncio.gather(worker("a"), worker("b")) == ["a", "b"]
            assert LoggerContext.get() is None

        asyncio.run(run())


# ---------------------------------------------------------------------------
# LoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture()
def _restore_logging():  # type: ignore[no-untyped-def]
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_logging")
class TestLoggerFactory:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO, json_output=True)
        structlog.get_logger("orders").info("order_listed", page=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "order_listed"
        assert payload["page"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "orders"
        assert "timestamp" in payload

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        LoggerFactory.configure(level=logging.WARNING)
        structlog.get_logger("orders").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_contextvars_are_merged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO)
        structlog.contextvars.bind_contextvars(request_id="r-9")
        try:
            get_logger_from_context().error("repository_error", operation="detail")
        finally:
            structlog.contextvars.clear_contextvars()
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["request_id"] == "r-9"
        assert payload["logger"] == "generic_sqla"

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO, json_output=False)
        structlog.get_logger("orders").info("pretty_event")
        assert "pretty_event" in capsys.readouterr().err

    def test_custom_stream(self) -> None:
        buffer = io.StringIO()
        configure_logging(logging.INFO, stream=buffer)
        structlog.get_logger("orders").warning("slow_query", ms=1200)
        payload = json.loads(buffer.getvalue().strip().splitlines()[-1])
        assert payload["event"] == "slow_query"
        assert payload["level"] == "warning"
