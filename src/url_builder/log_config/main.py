"""Logging configuration and utilities."""

import logging
import structlog
from typing import Any


def get_context_logger(name: str) -> structlog.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Minimum level name (e.g. "DEBUG", "INFO")
        json_output: Render JSON lines instead of console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


class BuildContext:
    """Context manager binding URL build context to every log event."""

    def __init__(self, **context: Any):
        """Initialize with context variables.

        Args:
            **context: Context key-value pairs
        """
        self.context = context

    def __enter__(self):
        """Enter context."""
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())


__all__ = [
    "get_context_logger",
    "configure_logging",
    "BuildContext",
]
