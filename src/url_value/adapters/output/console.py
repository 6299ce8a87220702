"""Write rendered URL values to standard output.

Flushes pending log output first so log lines never interleave with the
displayed URL.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
import rich_click as click

from url_value.domain.enums import OutputFormat
from url_value.domain.url import UrlValue


def format_url(url: UrlValue, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Return the line that :func:`display_url` would print, without the newline.

    Example:
        >>> format_url(UrlValue("http", "example.org"))
        'http://example.org'
        >>> format_url(UrlValue("http", "example.org"), OutputFormat.JSON)
        '{"protocol":"http","resource":"example.org","url":"http://example.org"}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps(url.as_dict()).decode("utf-8")
    return url.render()


def display_url(url: UrlValue, *, output_format: OutputFormat = OutputFormat.HUMAN) -> None:
    """Print *url* as one line on stdout.

    Args:
        url: Value to display.
        output_format: ``HUMAN`` prints the rendered URL verbatim, ``JSON``
            prints an object with ``protocol``, ``resource`` and ``url`` keys.

    Side Effects:
        Flushes pending log messages before writing to stdout.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(format_url(url, output_format))


__all__ = ["display_url", "format_url"]
