"""Logging configuration package."""

from .config import (
    SamplingStrategy,
    UrlLoggingConfig,
    get_logging_config,
    set_logging_config,
)
from .main import BuildContext, configure_logging, get_context_logger


__all__ = [
    "get_context_logger",
    "configure_logging",
    "BuildContext",
    "SamplingStrategy",
    "UrlLoggingConfig",
    "get_logging_config",
    "set_logging_config",
]
