"""
URL Builder Configuration Module

Configuration classes describing endpoints in plain, serializable form so
they can live in YAML settings and be turned into ``UrlEndpoint`` objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .builder import Absolute, CrossOrigin, Relative, Root
from .exceptions import UrlConfigValidationError


class RootKind(str, Enum):
    """Root mode enumeration."""

    ABSOLUTE = "absolute"  # "/path"
    RELATIVE = "relative"  # "path"
    CROSS_ORIGIN = "cross_origin"  # "https://host/path"


@dataclass
class EndpointConfig:
    """
    Configuration for a single endpoint.

    Attributes:
        root: Root mode
        pre_path: Scheme and host, required for cross-origin endpoints
        segments: Base path segments
        params: Base query parameters as plain values (str, int, float,
            bool, None, or lists of those); encoders are picked by type
        fragment: Default fragment

    Examples:
        >>> config = EndpointConfig.from_dict({
        ...     "root": "cross_origin",
        ...     "pre_path": "https://shop.example.com",
        ...     "segments": ["api", "v2"],
        ...     "params": {"locale": "en"},
        ... })
        >>> config.to_root()
        CrossOrigin(pre_path='https://shop.example.com')
    """

    root: RootKind = RootKind.ABSOLUTE
    pre_path: str | None = None
    segments: list[str] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)
    fragment: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.root, RootKind):
            try:
                self.root = RootKind(self.root)
            except ValueError:
                raise UrlConfigValidationError(
                    "Unknown root mode", field_name="root", invalid_value=self.root
                ) from None

        if self.root == RootKind.CROSS_ORIGIN and not self.pre_path:
            raise UrlConfigValidationError(
                "Cross-origin endpoint requires pre_path", field_name="pre_path"
            )

        if not isinstance(self.segments, list | tuple) or not all(
            isinstance(segment, str) for segment in self.segments
        ):
            raise UrlConfigValidationError(
                "Segments must be a list of strings",
                field_name="segments",
                invalid_value=self.segments,
            )
        self.segments = list(self.segments)

        if not isinstance(self.params, dict):
            raise UrlConfigValidationError(
                "Params must be a mapping", field_name="params", invalid_value=self.params
            )

    def to_root(self) -> Root:
        """Get the root selector for this endpoint."""
        if self.root == RootKind.CROSS_ORIGIN:
            return CrossOrigin(self.pre_path)
        if self.root == RootKind.RELATIVE:
            return Relative()
        return Absolute()

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "EndpointConfig":
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary with root, pre_path, segments, params, fragment

        Returns:
            EndpointConfig instance

        Raises:
            UrlConfigValidationError: If keys are unknown or values malformed
        """
        known = {"root", "pre_path", "segments", "params", "fragment"}
        unknown = set(config_dict) - known
        if unknown:
            raise UrlConfigValidationError(
                "Unknown endpoint configuration keys",
                field_name=", ".join(sorted(unknown)),
            )

        return cls(
            root=config_dict.get("root", RootKind.ABSOLUTE),
            pre_path=config_dict.get("pre_path"),
            segments=config_dict.get("segments") or [],
            params=config_dict.get("params") or {},
            fragment=config_dict.get("fragment"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root.value,
            "pre_path": self.pre_path,
            "segments": list(self.segments),
            "params": dict(self.params),
            "fragment": self.fragment,
        }


__all__ = ["RootKind", "EndpointConfig"]
