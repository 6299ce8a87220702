"""Process exit codes and the Click error that carries one.

Contents:
    * :class:`ExitCode` - Codes returned by ``url-value``.
    * :class:`CommandError` - Click error reported with a chosen exit code.
"""

from __future__ import annotations

from enum import IntEnum

import rich_click as click


class ExitCode(IntEnum):
    """Exit codes, following sysexits.h and errno where one fits.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


class CommandError(click.ClickException):
    """Print ``Error: <message>`` on stderr and exit with *exit_code*.

    Example:
        >>> err = CommandError("section 'x' not found", ExitCode.INVALID_ARGUMENT)
        >>> err.exit_code, err.format_message()
        (22, "section 'x' not found")
    """

    def __init__(self, message: str, exit_code: ExitCode) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


__all__ = ["CommandError", "ExitCode"]
