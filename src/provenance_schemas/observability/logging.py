"""Structured logging setup: structlog events rendered through stdlib ``logging``."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, TextIO

import structlog

_DEFAULT_LOGGER_NAME: Final[str] = "provenance_schemas"
_LOG_FORMATS: Final[frozenset[str]] = frozenset({"json", "console"})

_ACTIVE_HANDLE_LOCK = threading.Lock()
_ACTIVE_HANDLE: LoggingHandle | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Configuration for structured logging."""

    level: int | str = "INFO"
    log_format: str = "json"
    logger_name: str = _DEFAULT_LOGGER_NAME
    stream: TextIO | None = None


@dataclass(frozen=True, slots=True)
class LoggingHandle:
    """Installed handler and the stdlib logger it is attached to."""

    logger: logging.Logger
    handler: logging.Handler

    def close(self) -> None:
        self.handler.flush()
        self.logger.removeHandler(self.handler)
        self.handler.close()


def setup_logging(observability_config: Mapping[str, object] | None = None) -> LoggingHandle:
    """Configure logging from the ``[observability]`` config section."""

    cfg = dict(observability_config or {})
    raw_level = cfg.get("log_level", "INFO")
    raw_format = cfg.get("log_format", "json")
    return configure_logging(
        LoggingConfig(
            level=raw_level if isinstance(raw_level, (int, str)) else "INFO",
            log_format=raw_format if isinstance(raw_format, str) else "json",
        )
    )


def configure_logging(config: LoggingConfig) -> LoggingHandle:
    """Route structlog events to a stdlib handler on ``config.logger_name``.

    Reconfiguring replaces the previously installed handler.
    """

    level = _parse_log_level(config.level)
    renderer = _renderer_for(config.log_format)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(config.stream if config.stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    logger = logging.getLogger(config.logger_name)
    logger.setLevel(level)
    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handle = LoggingHandle(logger=logger, handler=handler)
    global _ACTIVE_HANDLE
    with _ACTIVE_HANDLE_LOCK:
        if _ACTIVE_HANDLE is not None:
            _ACTIVE_HANDLE.close()
        logger.addHandler(handler)
        _ACTIVE_HANDLE = handle
    return handle


def shutdown_logging() -> None:
    """Remove the installed handler and restore structlog defaults."""

    global _ACTIVE_HANDLE
    with _ACTIVE_HANDLE_LOCK:
        if _ACTIVE_HANDLE is not None:
            _ACTIVE_HANDLE.close()
            _ACTIVE_HANDLE = None
    structlog.reset_defaults()


def get_active_logging_handle() -> LoggingHandle | None:
    """Return the currently active handle, if one exists."""
    with _ACTIVE_HANDLE_LOCK:
        return _ACTIVE_HANDLE


def _renderer_for(log_format: str) -> structlog.types.Processor:
    if log_format not in _LOG_FORMATS:
        raise ValueError(f"log_format must be one of {sorted(_LOG_FORMATS)}, got {log_format!r}")
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer(sort_keys=True)


def _parse_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    normalized = value.strip().upper()
    resolved = logging.getLevelName(normalized)
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {value!r}")
    return resolved


__all__ = [
    "LoggingConfig",
    "LoggingHandle",
    "configure_logging",
    "get_active_logging_handle",
    "setup_logging",
    "shutdown_logging",
]
