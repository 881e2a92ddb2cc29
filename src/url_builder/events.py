"""URL builder event type constants."""

from enum import Enum


class UrlEvents(str, Enum):
    """Event type constants for structured logging."""

    # Build events
    BUILD_COMPLETED = "url.build.completed"

    # Configuration events
    SETTINGS_LOADED = "url.settings.loaded"
    ENDPOINT_LOADED = "url.endpoint.loaded"
    ENDPOINT_NOT_FOUND = "url.endpoint.not_found"
    ENDPOINT_INVALID = "url.endpoint.invalid"


__all__ = ["UrlEvents"]
