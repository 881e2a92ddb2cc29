"""Percent-encoding of single URL components."""

from urllib.parse import quote


def percent_encode(component: str) -> str:
    """
    Percent-encode one URL component.

    RFC 3986 unreserved characters (letters, digits, ``-``, ``.``, ``_``
    and ``~``) are kept, everything else is UTF-8 encoded and escaped,
    including ``/``, ``,``, ``[`` and ``]``.

    Args:
        component: Raw component text

    Returns:
        str: Encoded component

    Examples:
        >>> percent_encode("hat & scarf")
        'hat%20%26%20scarf'
        >>> percent_encode("1,2,3")
        '1%2C2%2C3'
    """
    return quote(component, safe="")


__all__ = ["percent_encode"]
