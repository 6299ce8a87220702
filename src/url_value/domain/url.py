"""URL value object composed of a protocol and a resource part.

Contents:
    * :data:`SEPARATOR` - Fixed literal joining protocol and resource.
    * :class:`UrlValue` - Immutable protocol/resource pair with rendering.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Final, TextIO

from .errors import InvalidUrlPartError

#: Literal placed between protocol and resource in the rendered form.
SEPARATOR: Final[str] = "://"


def _require_text(field_name: str, value: object) -> None:
    """Reject non-text parts; any ``str`` (including empty) is accepted verbatim."""
    if not isinstance(value, str):
        raise InvalidUrlPartError(f"{field_name} must be str, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class UrlValue:
    """A URL held as protocol and resource, rendered as ``protocol://resource``.

    Both fields are stored exactly as given. Nothing is trimmed, lower-cased,
    parsed or validated beyond being text, so a resource that itself contains
    ``://`` is kept verbatim.

    Attributes:
        protocol: Scheme token preceding the separator (e.g. ``"http"``).
        resource: Everything following the separator.

    Example:
        >>> url = UrlValue("http", "www.example.com/index.html")
        >>> url.render()
        'http://www.example.com/index.html'
        >>> str(UrlValue("", ""))
        '://'
    """

    protocol: str
    resource: str

    def __post_init__(self) -> None:
        _require_text("protocol", self.protocol)
        _require_text("resource", self.resource)

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """Return ``protocol + SEPARATOR + resource``.

        Example:
            >>> UrlValue("ftp", "a://b").render()
            'ftp://a://b'
        """
        return f"{self.protocol}{SEPARATOR}{self.resource}"

    def display(self, stream: TextIO | None = None) -> None:
        """Write the rendered URL as a single line to *stream* (stdout by default).

        Example:
            >>> UrlValue("ftp", "files.example.org/data.zip").display()
            ftp://files.example.org/data.zip
        """
        target = stream if stream is not None else sys.stdout
        target.write(self.render() + "\n")

    def with_protocol(self, protocol: str) -> UrlValue:
        """Return a copy carrying *protocol*; the original is left untouched.

        Example:
            >>> base = UrlValue("http", "example.org")
            >>> base.with_protocol("https").render(), base.render()
            ('https://example.org', 'http://example.org')
        """
        return replace(self, protocol=protocol)

    def with_resource(self, resource: str) -> UrlValue:
        """Return a copy carrying *resource*; the original is left untouched."""
        return replace(self, resource=resource)

    def as_dict(self) -> dict[str, str]:
        """Return both parts and the rendered form as a plain mapping.

        Example:
            >>> UrlValue("http", "example.org").as_dict()
            {'protocol': 'http', 'resource': 'example.org', 'url': 'http://example.org'}
        """
        return {"protocol": self.protocol, "resource": self.resource, "url": self.render()}


__all__ = [
    "SEPARATOR",
    "UrlValue",
]
