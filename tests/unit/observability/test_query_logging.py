"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_esquery.observability.logging import LIBRARY_LOGGER, JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.NOTSET)


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_query_level_applies_to_library_logger(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING, query_level=logging.DEBUG)
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.DEBUG

    def test_library_logger_inherits_by_default(self) -> None:
        JsonLoggerFactory.configure()
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.NOTSET

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("mp_esquery.test").info("query.built", filters=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "query.built"
        assert payload["filters"] == 2
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_console_renderer(self) -> None:
        JsonLoggerFactory.configure(json=False)
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("mp_esquery.query")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", request_id="r-1").info("hello")
        assert logs[0]["request_id"] == "r-1"
