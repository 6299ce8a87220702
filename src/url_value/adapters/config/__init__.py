"""Configuration adapter - loading, display, and overrides via lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered loading and profile validation
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import DEFAULT_CONFIG_FILE, clear_config_cache, get_config
from .overrides import apply_overrides

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "apply_overrides",
    "clear_config_cache",
    "display_config",
    "get_config",
]
