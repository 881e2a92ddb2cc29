"""Logging configuration with sampling and operation-level control."""

import hashlib
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SamplingStrategy(str, Enum):
    """Sampling strategy for debug logs."""

    RANDOM = "random"
    """Random sampling based on sample_rate probability"""

    DETERMINISTIC = "deterministic"
    """Deterministic sampling based on hash of the sampling key"""

    NONE = "none"
    """No sampling - log everything"""


@dataclass
class UrlLoggingConfig:
    """Configuration for URL builder logging.

    Builds happen often, so per-build debug events are sampled.

    Example:
        ```python
        config = UrlLoggingConfig(
            level="INFO",
            debug_sample_rate=0.1,
            sampling_strategy=SamplingStrategy.DETERMINISTIC,
            operation_levels={
                "build_url": "DEBUG",
                "load_endpoint": "INFO",
            }
        )
        ```
    """

    level: str = "INFO"

    debug_sample_rate: float = 0.0
    """Rate for sampling debug logs (0.0 = none, 1.0 = all)"""

    sampling_strategy: SamplingStrategy = SamplingStrategy.RANDOM

    operation_levels: dict[str, str] = field(default_factory=dict)
    """Per-operation log level overrides"""

    json_output: bool = False

    def should_log_debug(self, operation: str | None = None, key: str | None = None) -> bool:
        """Determine if a debug log should be emitted.

        Args:
            operation: Operation name (e.g., "build_url")
            key: Sampling key for deterministic sampling (e.g., endpoint name)

        Returns:
            True if debug log should be emitted, False otherwise
        """
        if operation and operation in self.operation_levels:
            if self.operation_levels[operation] != "DEBUG":
                return False

        if self.debug_sample_rate <= 0.0:
            return False
        elif self.debug_sample_rate >= 1.0:
            return True

        if self.sampling_strategy == SamplingStrategy.NONE:
            return True
        elif self.sampling_strategy == SamplingStrategy.DETERMINISTIC and key:
            hash_value = int(hashlib.md5(key.encode()).hexdigest()[:8], 16)
            threshold = int(self.debug_sample_rate * 0xFFFFFFFF)
            return hash_value < threshold

        return random.random() < self.debug_sample_rate

    def get_effective_level(self, operation: str | None = None) -> str:
        """Get effective log level for an operation."""
        if operation and operation in self.operation_levels:
            return self.operation_levels[operation]
        return self.level

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "UrlLoggingConfig":
        """Create configuration from dictionary.

        Args:
            config_dict: Configuration dictionary

        Returns:
            UrlLoggingConfig instance
        """
        config_dict = dict(config_dict)
        strategy = config_dict.get("sampling_strategy")
        if isinstance(strategy, str):
            config_dict["sampling_strategy"] = SamplingStrategy(strategy)

        return cls(**config_dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "debug_sample_rate": self.debug_sample_rate,
            "sampling_strategy": self.sampling_strategy.value,
            "operation_levels": self.operation_levels.copy(),
            "json_output": self.json_output,
        }


# Global default configuration
_default_config = UrlLoggingConfig()


def get_logging_config() -> UrlLoggingConfig:
    """Get global logging configuration."""
    return _default_config


def set_logging_config(config: UrlLoggingConfig) -> None:
    """Set global logging configuration.

    Args:
        config: UrlLoggingConfig to set as global
    """
    global _default_config
    _default_config = config


__all__ = [
    "SamplingStrategy",
    "UrlLoggingConfig",
    "get_logging_config",
    "set_logging_config",
]
