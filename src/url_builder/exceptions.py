"""URL builder exception hierarchy.

The builders and encoders themselves never raise. These exceptions come
from the layers that turn loosely typed input (configuration files, plain
Python values) into parameters and endpoints.

Exception Hierarchy:
    UrlBuilderException (base)
    ├── UrlEncodeError
    └── UrlConfigError
        ├── UrlConfigValidationError
        └── UrlConfigNotFoundError
"""

from typing import Optional


class UrlBuilderException(Exception):
    """Base exception for all URL builder errors.

    Catch this to handle every error raised by the package with a single
    except clause.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize URL builder exception.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UrlEncodeError(UrlBuilderException):
    """Raised when a plain value has no matching query encoder.

    Attributes:
        value_type: Name of the unsupported type
    """

    def __init__(
        self,
        message: str,
        value_type: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if value_type:
            context["value_type"] = value_type
        super().__init__(message, context)
        self.value_type = value_type


# Configuration Errors

class UrlConfigError(UrlBuilderException):
    """Base exception for endpoint configuration errors."""

    pass


class UrlConfigValidationError(UrlConfigError):
    """Raised when an endpoint configuration entry is malformed.

    Attributes:
        field_name: Configuration field that failed validation
        invalid_value: The rejected value
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        invalid_value: Optional[object] = None,
        context: Optional[dict] = None,
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field_name: Field that failed validation
            invalid_value: The rejected value
            context: Additional context
        """
        if context is None:
            context = {}
        if field_name:
            context["field_name"] = field_name
        if invalid_value is not None:
            context["invalid_value"] = str(invalid_value)[:100]
        super().__init__(message, context)
        self.field_name = field_name
        self.invalid_value = invalid_value


class UrlConfigNotFoundError(UrlConfigError):
    """Raised when a named endpoint is missing from the settings.

    Attributes:
        endpoint: Requested endpoint name
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if endpoint:
            context["endpoint"] = endpoint
        super().__init__(message, context)
        self.endpoint = endpoint


__all__ = [
    "UrlBuilderException",
    "UrlEncodeError",
    "UrlConfigError",
    "UrlConfigValidationError",
    "UrlConfigNotFoundError",
]
