"""
URL Builder Module

Assembles URL strings from a root, path segments, query parameters and an
optional fragment.

Path segments are used as given: they are neither percent-encoded nor
validated, so a segment containing ``/`` yields an ambiguous path.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .query import QueryParameter, to_query


@dataclass(frozen=True)
class Absolute:
    """Root for URLs starting with ``/``."""


@dataclass(frozen=True)
class Relative:
    """Root for URLs without any prefix."""


@dataclass(frozen=True)
class CrossOrigin:
    """
    Root for URLs on another origin.

    Attributes:
        pre_path: Scheme, host and optional port, e.g. ``https://example.com:8042``.
            Used verbatim and followed by ``/``.
    """

    pre_path: str


Root = Absolute | Relative | CrossOrigin


def root_prefix(root: Root) -> str:
    """
    Get the text a URL starts with for the given root.

    Args:
        root: Root selector

    Returns:
        str: ``"/"``, ``""`` or ``pre_path + "/"``
    """
    if isinstance(root, CrossOrigin):
        return root.pre_path + "/"
    if isinstance(root, Relative):
        return ""
    return "/"


def absolute(segments: Sequence[str], parameters: Iterable[QueryParameter]) -> str:
    """
    Build an absolute URL.

    Examples:
        >>> absolute(["packages", "elm", "core"], [])
        '/packages/elm/core'
        >>> absolute(["products"], [string("search", "hat")])
        '/products?search=hat'
    """
    return "/" + "/".join(segments) + to_query(parameters)


def relative(segments: Sequence[str], parameters: Iterable[QueryParameter]) -> str:
    """
    Build a relative URL.

    Examples:
        >>> relative(["blog", "2019"], [])
        'blog/2019'
    """
    return "/".join(segments) + to_query(parameters)


def cross_origin(
    pre_path: str,
    segments: Sequence[str],
    parameters: Iterable[QueryParameter],
) -> str:
    """
    Build a URL pointing at another origin.

    Args:
        pre_path: Scheme and host, without a trailing slash
        segments: Path segments
        parameters: Query parameters

    Returns:
        str: Complete URL

    Examples:
        >>> cross_origin("https://example.com", ["products"], [])
        'https://example.com/products'
    """
    return pre_path + "/" + "/".join(segments) + to_query(parameters)


def custom(
    root: Root,
    segments: Sequence[str],
    parameters: Iterable[QueryParameter],
    fragment: str | None = None,
) -> str:
    """
    Build a URL from any root, with an optional fragment.

    Args:
        root: Root selector
        segments: Path segments
        parameters: Query parameters
        fragment: Fragment appended after ``#``; nothing is appended for None

    Returns:
        str: Complete URL

    Examples:
        >>> custom(Absolute(), ["packages", "elm", "core"], [], "tutorial")
        '/packages/elm/core#tutorial'
    """
    url = root_prefix(root) + "/".join(segments) + to_query(parameters)
    if fragment is not None:
        url += "#" + fragment
    return url


__all__ = [
    "Absolute",
    "CrossOrigin",
    "Relative",
    "Root",
    "absolute",
    "cross_origin",
    "custom",
    "relative",
    "root_prefix",
]
