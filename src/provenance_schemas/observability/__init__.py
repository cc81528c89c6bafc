"""Public observability primitives: structured logging."""

from provenance_schemas.observability.logging import (
    LoggingConfig,
    LoggingHandle,
    configure_logging,
    get_active_logging_handle,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "LoggingConfig",
    "LoggingHandle",
    "configure_logging",
    "get_active_logging_handle",
    "setup_logging",
    "shutdown_logging",
]
