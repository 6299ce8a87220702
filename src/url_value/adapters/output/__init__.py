"""Output adapter - URL display on stdout.

Contents:
    * :mod:`.console` - Human and JSON rendering of URL values via Click
    * :mod:`.settings` - ``[display]`` section parsing
"""

from __future__ import annotations

from .console import display_url, format_url
from .settings import DisplayConfigModel, load_display_settings, resolve_output_format

__all__ = [
    "DisplayConfigModel",
    "display_url",
    "format_url",
    "load_display_settings",
    "resolve_output_format",
]
