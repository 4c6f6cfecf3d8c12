"""Tests for structured logging setup in ``observability/logger.py``."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from crdt_values.core.config import Settings
from crdt_values.domain.counter import Counter
from crdt_values.domain.scalar import BooleanScalar
from crdt_values.observability.logger import (
    CONVERSION_LOGGERS,
    HANDLER_NAME,
    get_logger,
    get_trace_id,
    new_trace_id,
    set_trace_id,
    setup_logging,
    setup_logging_from_settings,
)


def _our_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the installed handler and logger levels after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in _our_handlers():
        root.removeHandler(handler)
    root.setLevel(level)
    for name in CONVERSION_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


def _last_stderr_line(capsys) -> str:
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert lines, "nothing was written to stderr"
    return lines[-1]


class TestTraceId:
    def test_set_and_get(self):
        set_trace_id("abc")
        assert get_trace_id() == "abc"

    def test_new_trace_id_replaces_current(self):
        set_trace_id("abc")
        tid = new_trace_id()
        assert tid != "abc"
        assert get_trace_id() == tid
        assert len(tid) == 36


class TestSetupLogging:
    def test_json_renderer(self):
        setup_logging(level="DEBUG", format="json")
        (handler,) = _our_handlers()
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        setup_logging(level="INFO", format="console")
        (handler,) = _our_handlers()
        assert isinstance(handler.formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging(level="DEBUG")
        assert len(_our_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_stdlib_record_rendered_as_json(self, capsys):
        setup_logging(level="DEBUG", format="json")
        set_trace_id("trace-stdlib")
        logging.getLogger("crdt_values.test").info("plain %s", "record")
        entry = json.loads(_last_stderr_line(capsys))
        assert entry["event"] == "plain record"
        assert entry["trace_id"] == "trace-stdlib"
        assert entry["level"] == "info"
        assert entry["logger"] == "crdt_values.test"

    def test_structlog_event_rendered_as_json(self, capsys):
        setup_logging(level="DEBUG", format="json")
        set_trace_id("trace-native")
        get_logger("crdt_values.test").info("bound", field="count")
        entry = json.loads(_last_stderr_line(capsys))
        assert entry["event"] == "bound"
        assert entry["field"] == "count"
        assert entry["trace_id"] == "trace-native"


class TestSetupFromSettings:
    def test_conversion_failures_silenced(self):
        settings = Settings(observability={"log_conversion_failures": False})
        setup_logging_from_settings(settings)
        for name in CONVERSION_LOGGERS:
            assert logging.getLogger(name).level == logging.INFO

    def test_conversion_failures_follow_root(self):
        settings = Settings(observability={"log_conversion_failures": True})
        setup_logging_from_settings(settings)
        for name in CONVERSION_LOGGERS:
            assert logging.getLogger(name).level == logging.NOTSET

    def test_failed_conversion_rendered_as_json(self, capsys):
        setup_logging_from_settings(
            Settings(observability={"log_level": "DEBUG", "log_format": "json"})
        )
        set_trace_id("trace-counter")
        Counter.from_value(BooleanScalar(True))
        entry = json.loads(_last_stderr_line(capsys))
        assert entry["event"] == "Value Boolean(true) is not a counter"
        assert entry["level"] == "debug"
        assert entry["logger"] == "crdt_values.domain.counter"
        assert entry["trace_id"] == "trace-counter"
        assert "timestamp" in entry

    def test_silenced_conversion_failure_not_written(self, capsys):
        setup_logging_from_settings(
            Settings(
                observability={
                    "log_level": "DEBUG",
                    "log_conversion_failures": False,
                }
            )
        )
        Counter.from_value(BooleanScalar(True))
        assert "is not a counter" not in capsys.readouterr().err
