"""LoggerProtocol definition for structured logging.

Standardizes structured logging while remaining backend-agnostic. Every call
is a message plus key-value context, never an interpolated string.

Usage:
    from openapi_live.core.container import get_logger

    logger = get_logger()
    logger.info("openapi_exclusion_updated", operation="add_excluded_paths")

    scoped = logger.bind(spec_path="/openapi/json")
    scoped.error("openapi_schema_build_failed", error=exc, route_count=12)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
