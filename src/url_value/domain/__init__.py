"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.url` - The ``UrlValue`` value object and ``SEPARATOR``
    * :mod:`.behaviors` - Construction and rendering helpers
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    EXAMPLE_URL,
    build_url,
    render_url,
)
from .enums import OutputFormat
from .errors import ConfigurationError, InvalidUrlPartError
from .url import SEPARATOR, UrlValue

__all__ = [
    # Value objects
    "SEPARATOR",
    "UrlValue",
    # Behaviors
    "EXAMPLE_URL",
    "build_url",
    "render_url",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidUrlPartError",
]
