"""
Query Parameter Module

Typed query parameters and their serialization into a query string.

A query parameter is either ``Present`` (key and value already
percent-encoded) or ``Absent`` (dropped from the output). Encoders turn
plain values into parameters; ``to_query`` joins whatever survives.

Usage:
    from url_builder.query import bool_, int_, list_, maybe, string, to_query

    to_query([
        string("search", "hat"),
        list_(int_, "sizes", [1, 2, 3]),
        maybe(bool_, "discounted", None),
    ])
    # '?search=hat&sizes=1%2C2%2C3'
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .encoding import percent_encode
from .exceptions import UrlEncodeError


@dataclass(frozen=True)
class Present:
    """Query parameter that appears in the output as ``key=value``."""

    key: str
    value: str

    def to_pair(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class Absent:
    """Query parameter that is omitted from the output."""


QueryParameter = Present | Absent
Encoder = Callable[[str, Any], QueryParameter]

ABSENT = Absent()


# ==================== Encoders ====================


def string(key: str, value: str) -> QueryParameter:
    """
    Encode a string parameter.

    Args:
        key: Parameter name
        value: Parameter value, present even when empty

    Returns:
        QueryParameter: Present parameter with both parts percent-encoded
    """
    return Present(percent_encode(key), percent_encode(value))


def non_empty_string(key: str, value: str) -> QueryParameter:
    """Encode a string parameter, omitting it when the value is ``""``."""
    if value == "":
        return ABSENT
    return string(key, value)


def int_(key: str, value: int) -> QueryParameter:
    """Encode an integer in canonical base-10 form."""
    return Present(percent_encode(key), format(value, "d"))


def float_(key: str, value: float) -> QueryParameter:
    """
    Encode a float using its shortest round-trip representation.

    ``4.2`` becomes ``"4.2"``; ``nan`` and ``inf`` keep Python's own
    spelling.
    """
    return Present(percent_encode(key), repr(float(value)))


def bool_(key: str, value: bool) -> QueryParameter:
    """Encode a boolean as ``true`` or ``false``."""
    return Present(percent_encode(key), "true" if value else "false")


def maybe(encoder: Encoder, key: str, value: Any | None) -> QueryParameter:
    """
    Encode an optional value.

    Args:
        encoder: Encoder applied when the value is present
        key: Parameter name
        value: Value or None

    Returns:
        QueryParameter: ``encoder(key, value)``, or ``ABSENT`` for None
    """
    if value is None:
        return ABSENT
    return encoder(key, value)


def _join_encoded(encoder: Encoder, values: Iterable[Any]) -> str:
    # Per-element keys are discarded, only the encoded values are kept
    encoded = []
    for value in values:
        parameter = encoder("", value)
        if isinstance(parameter, Present):
            encoded.append(parameter.value)
    return ",".join(encoded)


def list_(encoder: Encoder, key: str, values: Sequence[Any]) -> QueryParameter:
    """
    Encode a sequence as one comma-separated parameter.

    Each element is encoded with ``encoder``; elements that come back
    absent are skipped. The joined text is then encoded once more as a
    single string value, so commas appear as ``%2C``.

    Args:
        encoder: Encoder for a single element
        key: Parameter name
        values: Elements to join

    Returns:
        QueryParameter: Present parameter, or ``ABSENT`` for an empty sequence

    Examples:
        >>> list_(int_, "sizes", [1, 2, 3])
        Present(key='sizes', value='1%2C2%2C3')
    """
    if not values:
        return ABSENT
    return string(key, _join_encoded(encoder, values))


def bracketed_list(encoder: Encoder, key: str, values: Sequence[Any]) -> QueryParameter:
    """
    Encode a sequence as one comma-separated parameter wrapped in brackets.

    Same as ``list_`` except the joined text is wrapped as ``[...]``
    before the final encoding.

    Examples:
        >>> bracketed_list(int_, "sizes", [1, 2, 3])
        Present(key='sizes', value='%5B1%2C2%2C3%5D')
    """
    if not values:
        return ABSENT
    return string(key, f"[{_join_encoded(encoder, values)}]")


# ==================== Inference ====================


def encoder_for(value: Any) -> Encoder:
    """
    Pick the encoder matching a plain Python value.

    Used for configuration-driven parameters where the value type is only
    known at runtime. ``bool`` is checked before ``int`` since it is an
    ``int`` subclass.

    Args:
        value: Sample value

    Returns:
        Encoder: Encoder accepting ``value``

    Raises:
        UrlEncodeError: If no encoder handles the value's type
    """
    if value is None:
        return lambda key, _: ABSENT
    if isinstance(value, str):
        return string
    if isinstance(value, bool):
        return bool_
    if isinstance(value, int):
        return int_
    if isinstance(value, float):
        return float_
    if isinstance(value, list | tuple):
        return lambda key, values: list_(_element_encoder, key, values)

    raise UrlEncodeError(
        "No query encoder for value type",
        value_type=type(value).__name__,
    )


def _element_encoder(key: str, value: Any) -> QueryParameter:
    return encoder_for(value)(key, value)


def param(key: str, value: Any) -> QueryParameter:
    """
    Encode a plain Python value with the encoder its type calls for.

    Args:
        key: Parameter name
        value: str, bool, int, float, None, or a list/tuple of those

    Returns:
        QueryParameter: Encoded parameter

    Raises:
        UrlEncodeError: If the value (or a list element) has an unsupported type

    Examples:
        >>> param("page", 2)
        Present(key='page', value='2')
        >>> param("q", None)
        Absent()
    """
    return encoder_for(value)(key, value)


# ==================== Serialization ====================


def to_query(parameters: Iterable[QueryParameter]) -> str:
    """
    Serialize parameters into a query string.

    Absent parameters are dropped and the remaining ones keep their
    order. The leading ``?`` is only emitted when at least one parameter
    survives.

    Args:
        parameters: Parameters in output order

    Returns:
        str: ``"?k=v&k=v"`` or ``""``
    """
    pairs = [p.to_pair() for p in parameters if isinstance(p, Present)]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


__all__ = [
    "ABSENT",
    "Absent",
    "Encoder",
    "Present",
    "QueryParameter",
    "bool_",
    "bracketed_list",
    "encoder_for",
    "float_",
    "int_",
    "list_",
    "maybe",
    "non_empty_string",
    "param",
    "string",
    "to_query",
]
