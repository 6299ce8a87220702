"""In-memory URL display adapter for testing.

Contents:
    * :class:`DisplaySpy` - Records displayed URLs instead of printing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.enums import OutputFormat
from ...domain.url import UrlValue
from ..output.console import format_url


@dataclass
class DisplaySpy:
    """Captures display calls for test assertions.

    ``display_url`` matches the DisplayUrl protocol, so a bound method can be
    wired straight into AppServices.

    Attributes:
        displayed: URL values in the order they were displayed.
        lines: The exact lines production display would have printed.

    Example:
        >>> spy = DisplaySpy()
        >>> spy.display_url(UrlValue("ftp", "files.example.org/data.zip"))
        >>> spy.lines
        ['ftp://files.example.org/data.zip']
    """

    displayed: list[UrlValue] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    def clear(self) -> None:
        """Reset captured data."""
        self.displayed.clear()
        self.lines.clear()

    def display_url(self, url: UrlValue, *, output_format: OutputFormat = OutputFormat.HUMAN) -> None:
        """Record *url* and the line it would render to."""
        self.displayed.append(url)
        self.lines.append(format_url(url, output_format))


__all__ = ["DisplaySpy"]
