"""Pytest configuration and shared fixtures for URL builder tests."""

import sys
from pathlib import Path

import pytest
import structlog


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from url_builder.builder import CrossOrigin
from url_builder.endpoint import UrlEndpoint
from url_builder.log_config import UrlLoggingConfig, set_logging_config
from url_builder.settings import UrlBuilderSettings, get_settings


# ==================== Pytest Configuration ====================


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default structlog and logging configuration after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    set_logging_config(UrlLoggingConfig())


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from cached settings and URL_BUILDER_* variables."""
    monkeypatch.delenv("URL_BUILDER_ENVIRONMENT", raising=False)
    monkeypatch.delenv("URL_BUILDER_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ==================== Configuration Fixtures ====================


@pytest.fixture
def endpoints_config() -> dict:
    """Endpoint entries as they appear in YAML settings."""
    return {
        "products": {
            "root": "cross_origin",
            "pre_path": "https://${region|eu}.shop.example.com",
            "segments": ["api", "v2", "products"],
            "params": {"locale": "en"},
        },
        "search": {
            "root": "absolute",
            "segments": ["search"],
            "params": {"tags": ["${tag}", "new"], "limit": 20, "debug": None},
            "fragment": "results",
        },
        "assets": {
            "root": "relative",
            "segments": ["static", "${version|v1}"],
        },
    }


@pytest.fixture
def settings(endpoints_config) -> UrlBuilderSettings:
    """Settings holding the sample endpoints."""
    return UrlBuilderSettings(endpoints=endpoints_config)


@pytest.fixture
def debug_logging():
    """Emit every sampled debug event."""
    set_logging_config(UrlLoggingConfig(level="DEBUG", debug_sample_rate=1.0))


# ==================== Endpoint Fixtures ====================


@pytest.fixture
def api_endpoint() -> UrlEndpoint:
    """Cross-origin endpoint with a base path."""
    return UrlEndpoint(CrossOrigin("https://example.com"), ["api"], name="api")
