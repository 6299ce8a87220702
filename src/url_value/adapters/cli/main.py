"""Run the ``url-value`` group and turn its outcome into an exit code.

Contents:
    * :func:`main` - Entry point shared by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from url_value import __init__conf__
from url_value.domain.errors import ConfigurationError

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from url_value.composition import AppServices

#: Characters of traceback text printed without and with ``--traceback``.
SUMMARY_TRACEBACK_CHARS: Final[int] = 500
FULL_TRACEBACK_CHARS: Final[int] = 10_000


@contextmanager
def _scoped_traceback_flags() -> Iterator[None]:
    """Undo whatever ``--traceback`` set on lib_cli_exit_tools once the run ends."""
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        yield
    finally:
        lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


def _report_current_exception() -> None:
    """Print the exception being handled, in full only under ``--traceback``."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=FULL_TRACEBACK_CHARS if verbose else SUMMARY_TRACEBACK_CHARS,
    )


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except ConfigurationError:
        _report_current_exception()
        return ExitCode.CONFIG_ERROR
    except Exception as exc:
        _report_current_exception()
        return lib_cli_exit_tools.get_system_exit_code(exc)
    return ExitCode.SUCCESS


def main(argv: Sequence[str] | None = None, *, services_factory: Callable[[], AppServices] | None = None) -> int:
    """Run ``url-value`` with *argv* (``sys.argv[1:]`` when None).

    Invalid configuration exits with ``CONFIG_ERROR``; Click usage errors keep
    Click's code; anything else is mapped by lib_cli_exit_tools. The logging
    runtime is shut down afterwards when running on the main thread.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from url_value.composition import build_production
        >>> main(["show", "http", "example.org"], services_factory=build_production)  # doctest: +SKIP
        http://example.org
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass composition.build_production")

    args = list(argv) if argv is not None else sys.argv[1:]
    with _scoped_traceback_flags():
        try:
            return _invoke(args, services_factory)
        finally:
            if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
                lib_log_rich.runtime.shutdown()


__all__ = ["main"]
