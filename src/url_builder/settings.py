"""
Settings Management Module

Provides pydantic-based configuration management with:
- YAML configuration file loading
- Environment variable overrides (URL_BUILDER_*)
- Multi-environment support (dev, prod, test)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .events import UrlEvents
from .log_config import get_context_logger


logger = get_context_logger("url_settings")


class UrlBuilderSettings(BaseSettings):
    """
    URL builder settings with multi-environment support.

    Configuration hierarchy (lowest to highest precedence):
    1. config.yaml (base)
    2. config.{environment}.yaml (environment-specific)
    3. Environment variables (URL_BUILDER_*)

    Examples:
        >>> settings = UrlBuilderSettings.load_from_yaml(Path("settings/config.yaml"))
        >>> settings.endpoints["products"]["root"]
        'cross_origin'
    """

    model_config = SettingsConfigDict(
        env_prefix="URL_BUILDER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="allow",
    )

    environment: str = "development"
    log_level: str = "INFO"

    logging: dict[str, Any] = Field(default_factory=dict)
    endpoints: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment variables win over values read from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "UrlBuilderSettings":
        """
        Load settings from YAML configuration file.

        Args:
            config_path: Path to the base config file

        Returns:
            UrlBuilderSettings instance
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        env = os.getenv("URL_BUILDER_ENVIRONMENT", config_data.get("environment", "development"))
        env_config_path = config_path.parent / f"config.{env}.yaml"

        if env_config_path.exists():
            with open(env_config_path, encoding="utf-8") as f:
                env_config = yaml.safe_load(f) or {}
                config_data = cls._deep_merge(config_data, env_config)

        logger.debug(
            UrlEvents.SETTINGS_LOADED.value,
            config_path=str(config_path),
            environment=env,
            endpoints=len(config_data.get("endpoints") or {}),
        )
        return cls(**config_data)

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = UrlBuilderSettings._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


@lru_cache
def get_settings(config_path: Path | None = None) -> UrlBuilderSettings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional config file path; without one only the
            environment is read

    Returns:
        UrlBuilderSettings instance
    """
    if config_path is None:
        return UrlBuilderSettings()
    return UrlBuilderSettings.load_from_yaml(config_path)


__all__ = ["UrlBuilderSettings", "get_settings"]
