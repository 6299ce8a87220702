"""Subcommands of the ``url-value`` group.

Contents:
    * URL commands from :mod:`.url_cmd`
    * ``info`` from :mod:`.info`
    * ``config`` from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .url_cmd import cli_example, cli_show

__all__ = [
    "cli_config",
    "cli_example",
    "cli_info",
    "cli_show",
]
