"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

from .url import UrlValue

EXAMPLE_URL: Final[UrlValue] = UrlValue("http", "www.example.com/index.html")


def build_url(protocol: str, resource: str) -> UrlValue:
    r"""Construct a :class:`UrlValue` from its two parts.

    Both parts are stored unchanged; empty strings are legal.

    Args:
        protocol: Scheme token preceding the separator.
        resource: Remainder following the separator.

    Returns:
        A new immutable URL value.

    Raises:
        InvalidUrlPartError: If either part is not a ``str``.

    Example:
        >>> build_url("http", "www.example.com/index.html").render()
        'http://www.example.com/index.html'
    """
    return UrlValue(protocol, resource)


def render_url(url: UrlValue) -> str:
    """Return the textual form of *url*.

    Example:
        >>> render_url(EXAMPLE_URL)
        'http://www.example.com/index.html'
    """
    return url.render()


__all__ = [
    "EXAMPLE_URL",
    "build_url",
    "render_url",
]
