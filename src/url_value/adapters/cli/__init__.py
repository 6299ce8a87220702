"""The ``url-value`` command-line interface.

Contents:
    * :func:`cli` - Root command group from :mod:`.root`
    * :func:`main` - Exit-code-returning entry point from :mod:`.main`
    * Subcommands from :mod:`.commands`
    * :class:`ExitCode` and :class:`CommandError` from :mod:`.exit_codes`
"""

from __future__ import annotations

from .commands import cli_config, cli_example, cli_info, cli_show
from .context import CLIContext, get_cli_context
from .exit_codes import CommandError, ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "CommandError",
    "ExitCode",
    "cli",
    "cli_config",
    "cli_example",
    "cli_info",
    "cli_show",
    "get_cli_context",
    "main",
]
