"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory, without touching the filesystem or stdout.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.output` - URL display spy (DisplaySpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .output import DisplaySpy

# Static conformance assertions
if TYPE_CHECKING:
    from url_value.application.ports import (
        DisplayConfig,
        DisplayUrl,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_display_url: DisplayUrl = DisplaySpy().display_url
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "DisplaySpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
