# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for TRACE-aware logging setup."""

from __future__ import annotations

import logging
import sys

import pytest

from jsonanything.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    JsonAnythingLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from jsonanything.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(raw: str | None, expected: int | None) -> None:
    """Names are case-insensitive; digits are taken literally."""
    assert parse_log_level(raw) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable selects the level."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_env_log_level() == logging.INFO


def test_trace_level_is_registered() -> None:
    """TRACE sits below DEBUG and has a name."""
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_logger_class_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Project loggers expose ``trace()``."""
    logger = get_logger("jsonanything.tests.trace")
    assert isinstance(logger, JsonAnythingLogger)
    with caplog.at_level(TRACE_LEVEL, logger="jsonanything.tests.trace"):
        logger.trace("tracing %s", "works")
    assert "tracing works" in caplog.text


def test_setup_logging_installs_single_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """Repeated setup does not stack handlers; diagnostics go to stderr."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    try:
        setup_logging()
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        chalk_handlers = [h for h in root.handlers if isinstance(h.formatter, ChalkFormatter)]
        assert len(chalk_handlers) == 1
        assert isinstance(chalk_handlers[0], logging.StreamHandler)
        assert chalk_handlers[0].stream is sys.stderr
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_chalk_formatter_keeps_message() -> None:
    """Colorized output still contains the formatted message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %d", (3,), None)
    assert "careful 3" in ChalkFormatter("%(message)s").format(record)
