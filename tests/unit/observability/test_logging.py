"""
provenance-schemas — unit tests for observability logging

File: tests/unit/observability/test_logging.py
Last updated: 2026-10-19

Purpose
- Validate structlog routing onto a stdlib handler with JSON and console rendering.

What this test file should cover
- JSON line validity and standard fields (event, level, logger, timestamp).
- Level filtering for structlog and foreign stdlib records.
- Reconfiguration replaces the active handler; shutdown removes it.
- Invalid levels and formats fail fast.

Functional requirements
- Offline operation; output captured in memory.

Non-functional requirements
- Deterministic and non-flaky.
"""

from __future__ import annotations

import io
import json
import logging
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest
import structlog

from provenance_schemas.observability import (
    LoggingConfig,
    configure_logging,
    get_active_logging_handle,
    setup_logging,
    shutdown_logging,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _cleanup_logging() -> Iterator[None]:
    yield
    shutdown_logging()


def _logger_name() -> str:
    return f"provenance_schemas.tests.logging.{uuid4().hex}"


def _json_lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_json_logging_emits_one_object_per_event() -> None:
    name = _logger_name()
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="DEBUG", logger_name=name, stream=stream))

    structlog.get_logger(f"{name}.validator").info("record_rejected", schema="GasID", violations=2)

    parsed = _json_lines(stream)
    assert len(parsed) == 1
    entry = parsed[0]
    assert entry["event"] == "record_rejected"
    assert entry["level"] == "info"
    assert entry["logger"] == f"{name}.validator"
    assert entry["schema"] == "GasID"
    assert entry["violations"] == 2
    assert isinstance(entry["timestamp"], str)


def test_level_filtering_applies_to_structlog_and_stdlib() -> None:
    name = _logger_name()
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="WARNING", logger_name=name, stream=stream))

    structlog.get_logger(name).info("dropped")
    structlog.get_logger(name).warning("kept", reason="duplicate")
    logging.getLogger(f"{name}.plain").error("plain %s", "message")

    parsed = _json_lines(stream)
    assert [entry["event"] for entry in parsed] == ["kept", "plain message"]
    assert parsed[1]["level"] == "error"


def test_console_format_renders_key_values() -> None:
    name = _logger_name()
    stream = io.StringIO()
    configure_logging(LoggingConfig(log_format="console", logger_name=name, stream=stream))

    structlog.get_logger(name).info("reference_data_loaded", localities=42)

    output = stream.getvalue()
    assert "reference_data_loaded" in output
    assert "localities=42" in output


def test_reconfigure_replaces_handler_and_shutdown_removes_it() -> None:
    name = _logger_name()
    first = configure_logging(LoggingConfig(logger_name=name, stream=io.StringIO()))
    second = configure_logging(LoggingConfig(logger_name=name, stream=io.StringIO()))

    logger = logging.getLogger(name)
    assert first.handler not in logger.handlers
    assert logger.handlers == [second.handler]
    assert get_active_logging_handle() is second

    shutdown_logging()
    assert logger.handlers == []
    assert get_active_logging_handle() is None


def test_setup_logging_reads_observability_section() -> None:
    handle = setup_logging({"log_level": "ERROR", "log_format": "console"})
    assert handle.logger.name == "provenance_schemas"
    assert handle.logger.level == logging.ERROR
    assert handle.logger.propagate is False


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (LoggingConfig(level="LOUD"), "unknown log level"),
        (LoggingConfig(log_format="xml"), "log_format must be one of"),
    ],
)
def test_invalid_settings_fail_fast(config: LoggingConfig, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        configure_logging(config)
