"""Application layer - port definitions.

Contains port protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    DisplayUrl,
    GetConfig,
    InitLogging,
)

__all__ = [
    "DisplayConfig",
    "DisplayUrl",
    "GetConfig",
    "InitLogging",
]
