"""
Endpoint Configuration Loader

Loads named endpoint configurations from settings, resolving template
variables against a caller-supplied context before building endpoints.
"""

import re
from typing import Any

from .config import EndpointConfig
from .endpoint import UrlEndpoint
from .events import UrlEvents
from .exceptions import UrlConfigNotFoundError, UrlConfigValidationError
from .log_config import get_context_logger
from .settings import UrlBuilderSettings, get_settings


class TemplateResolver:
    """
    Resolves template variables in configuration values.

    Supports:
    - ${variable} - Simple substitution
    - ${path.to.value} - Nested path access
    - ${variable|default} - Default value if missing

    A placeholder with no value and no default is left untouched.
    """

    TEMPLATE_PATTERN = re.compile(r"\$\{([^}]+)\}")

    @classmethod
    def resolve(cls, template: Any, context: dict[str, Any]) -> Any:
        """
        Resolve template string with context values.

        Non-string values are returned unchanged.

        Args:
            template: Template string with ${variable} syntax
            context: Dictionary of available variables

        Returns:
            Resolved value

        Examples:
            >>> context = {"user": "john", "shop": {"region": "eu"}}
            >>> TemplateResolver.resolve("${user}", context)
            'john'
            >>> TemplateResolver.resolve("https://${shop.region}.example.com", context)
            'https://eu.example.com'
            >>> TemplateResolver.resolve("${missing|en}", context)
            'en'
        """
        if not isinstance(template, str):
            return template

        def replacer(match):
            expr = match.group(1)

            if "|" in expr:
                var_path, default = expr.split("|", 1)
                value = cls._get_nested_value(context, var_path.strip())
                return str(value if value is not None else default)

            value = cls._get_nested_value(context, expr.strip())
            return str(value) if value is not None else match.group(0)

        return cls.TEMPLATE_PATTERN.sub(replacer, template)

    @classmethod
    def resolve_list(cls, items: list[Any], context: dict[str, Any]) -> list[Any]:
        return [cls.resolve(item, context) for item in items]

    @staticmethod
    def _get_nested_value(data: dict[str, Any], path: str) -> Any:
        """
        Get value from nested dictionary using dot-notation path.

        Args:
            data: Dictionary to traverse
            path: Dot-separated path (e.g., "shop.region")

        Returns:
            Value at path or None if not found
        """
        current: Any = data
        for key in path.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(key)
            if current is None:
                return None
        return current


class EndpointConfigLoader:
    """
    Loads endpoint configurations from settings.

    Handles:
    - Endpoint lookup by name
    - Template variable resolution in pre_path, segments, params and fragment
    - Conversion to ready-to-use UrlEndpoint objects
    """

    def __init__(self, settings: UrlBuilderSettings | None = None):
        """
        Initialize config loader.

        Args:
            settings: Settings instance (defaults to global settings)
        """
        self.settings = settings or get_settings()
        self.logger = get_context_logger("endpoint_loader")

    def endpoint_names(self) -> list[str]:
        return sorted(self.settings.endpoints)

    def get_endpoint_config(self, name: str) -> EndpointConfig:
        """
        Get endpoint configuration from settings.

        Args:
            name: Endpoint name

        Returns:
            EndpointConfig for the endpoint

        Raises:
            UrlConfigNotFoundError: If endpoint not found
            UrlConfigValidationError: If the entry is malformed
        """
        endpoints = self.settings.endpoints
        if name not in endpoints:
            self.logger.warning(
                UrlEvents.ENDPOINT_NOT_FOUND.value,
                endpoint=name,
                available=self.endpoint_names(),
            )
            raise UrlConfigNotFoundError(
                f"Endpoint '{name}' not found in configuration", endpoint=name
            )

        raw = endpoints[name]
        if not isinstance(raw, dict):
            raise UrlConfigValidationError(
                f"Endpoint '{name}' must be a mapping",
                invalid_value=raw,
                context={"endpoint": name},
            )

        try:
            return EndpointConfig.from_dict(raw)
        except UrlConfigValidationError as e:
            self.logger.error(
                UrlEvents.ENDPOINT_INVALID.value,
                endpoint=name,
                error=str(e),
            )
            e.context.setdefault("endpoint", name)
            raise

    def resolve_config(
        self, name: str, context: dict[str, Any] | None = None
    ) -> EndpointConfig:
        """
        Get endpoint configuration with templates resolved.

        Args:
            name: Endpoint name
            context: Variables available to ${...} placeholders

        Returns:
            EndpointConfig with resolved values
        """
        config = self.get_endpoint_config(name)
        context = context or {}

        return EndpointConfig(
            root=config.root,
            pre_path=TemplateResolver.resolve(config.pre_path, context),
            segments=TemplateResolver.resolve_list(config.segments, context),
            params={
                key: TemplateResolver.resolve_list(value, context)
                if isinstance(value, list)
                else TemplateResolver.resolve(value, context)
                for key, value in config.params.items()
            },
            fragment=TemplateResolver.resolve(config.fragment, context),
        )

    def build_endpoint(
        self, name: str, context: dict[str, Any] | None = None
    ) -> UrlEndpoint:
        """
        Build a ready-to-use endpoint from its configuration.

        Args:
            name: Endpoint name
            context: Variables available to ${...} placeholders

        Returns:
            UrlEndpoint for the named configuration

        Raises:
            UrlConfigNotFoundError: If endpoint not found
            UrlConfigValidationError: If the entry is malformed
            UrlEncodeError: If a parameter value has an unsupported type
        """
        config = self.resolve_config(name, context)
        endpoint = UrlEndpoint.from_config(config, name=name)

        self.logger.debug(
            UrlEvents.ENDPOINT_LOADED.value,
            endpoint=name,
            root=config.root.value,
            segments=len(config.segments),
            params=len(config.params),
        )
        return endpoint


__all__ = [
    "TemplateResolver",
    "EndpointConfigLoader",
]
