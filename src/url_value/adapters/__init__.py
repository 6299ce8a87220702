"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading and display
    * :mod:`.output` - URL display on stdout
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
