"""Public package surface exposing the URL value type, display, and configuration.

Imports are routed through the architectural layers:
- Domain exports: ``UrlValue`` and its construction/rendering helpers
- Composition exports: wired adapter services (configuration, display)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import display_url, get_config

# Domain exports
from .domain.behaviors import (
    EXAMPLE_URL,
    build_url,
    render_url,
)
from .domain.errors import InvalidUrlPartError
from .domain.url import SEPARATOR, UrlValue

__all__ = [
    "EXAMPLE_URL",
    "SEPARATOR",
    "InvalidUrlPartError",
    "UrlValue",
    "build_url",
    "display_url",
    "get_config",
    "print_info",
    "render_url",
]
