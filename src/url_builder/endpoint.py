"""
URL Builder Endpoint Module

Reusable endpoint with an embedded root, base path and base query
parameters. Every call to ``build`` appends to that base without changing it.
"""

from collections.abc import Iterable
from typing import Any

from .builder import Absolute, Root, custom
from .config import EndpointConfig
from .events import UrlEvents
from .log_config import get_context_logger, get_logging_config
from .query import Present, QueryParameter, param


class UrlEndpoint:
    """
    URL endpoint with embedded root, base segments and base parameters.

    Base segments come before call segments and base parameters before call
    parameters. Parameters are never merged or de-duplicated: a key given
    in both places appears twice, in that order.

    Example:
        api = UrlEndpoint(CrossOrigin("https://shop.example.com"), ["api"])
        api.build(["products"], [string("search", "hat")])
        # 'https://shop.example.com/api/products?search=hat'
    """

    def __init__(
        self,
        root: Root | None = None,
        segments: Iterable[str] = (),
        params: Iterable[QueryParameter] = (),
        fragment: str | None = None,
        name: str | None = None,
    ):
        """
        Initialize endpoint.

        Args:
            root: Root selector (defaults to Absolute)
            segments: Base path segments
            params: Base query parameters
            fragment: Default fragment, used when ``build`` gets none
            name: Endpoint name for log events
        """
        self.root = root if root is not None else Absolute()
        self.segments = tuple(segments)
        self.params = tuple(params)
        self.fragment = fragment
        self.name = name

        self.logger = get_context_logger("url_endpoint")

    def build(
        self,
        segments: Iterable[str] = (),
        params: Iterable[QueryParameter] = (),
        fragment: str | None = None,
    ) -> str:
        """
        Build the full URL.

        Args:
            segments: Segments appended after the base segments
            params: Parameters appended after the base parameters
            fragment: Fragment overriding the default one

        Returns:
            str: Complete URL
        """
        all_params = self.params + tuple(params)
        url = custom(
            self.root,
            self.segments + tuple(segments),
            all_params,
            fragment if fragment is not None else self.fragment,
        )

        if get_logging_config().should_log_debug("build_url", key=self.name):
            self.logger.debug(
                UrlEvents.BUILD_COMPLETED.value,
                endpoint=self.name,
                root=type(self.root).__name__,
                params_count=sum(1 for p in all_params if isinstance(p, Present)),
                url=url,
            )

        return url

    def copy(self) -> "UrlEndpoint":
        return UrlEndpoint(
            root=self.root,
            segments=self.segments,
            params=self.params,
            fragment=self.fragment,
            name=self.name,
        )

    def with_params(self, *params: QueryParameter) -> "UrlEndpoint":
        """
        Create a new endpoint with additional base parameters.

        Args:
            *params: Parameters appended to the current base parameters

        Returns:
            UrlEndpoint: New endpoint
        """
        new_endpoint = self.copy()
        new_endpoint.params = self.params + params
        return new_endpoint

    def with_segments(self, *segments: str) -> "UrlEndpoint":
        """Create a new endpoint with additional base segments."""
        new_endpoint = self.copy()
        new_endpoint.segments = self.segments + segments
        return new_endpoint

    def with_fragment(self, fragment: str | None) -> "UrlEndpoint":
        """Create a new endpoint with a different default fragment."""
        new_endpoint = self.copy()
        new_endpoint.fragment = fragment
        return new_endpoint

    @classmethod
    def from_config(
        cls, config: EndpointConfig | dict[str, Any], name: str | None = None
    ) -> "UrlEndpoint":
        """
        Create an endpoint from its configuration.

        Parameter encoders are picked from the value types.

        Args:
            config: EndpointConfig or a dict accepted by ``EndpointConfig.from_dict``
            name: Endpoint name for log events

        Returns:
            UrlEndpoint: New endpoint

        Raises:
            UrlConfigValidationError: If the configuration is malformed
            UrlEncodeError: If a parameter value has an unsupported type
        """
        if isinstance(config, dict):
            config = EndpointConfig.from_dict(config)

        return cls(
            root=config.to_root(),
            segments=config.segments,
            params=[param(key, value) for key, value in config.params.items()],
            fragment=config.fragment,
            name=name,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlEndpoint):
            return NotImplemented
        return (self.root, self.segments, self.params, self.fragment) == (
            other.root,
            other.segments,
            other.params,
            other.fragment,
        )

    def __repr__(self) -> str:
        return f"UrlEndpoint(root={self.root!r}, segments={list(self.segments)}, params={len(self.params)}, fragment={self.fragment!r})"


__all__ = ["UrlEndpoint"]
