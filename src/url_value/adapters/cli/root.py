"""The ``url-value`` command group.

The group callback turns the services factory in ``ctx.obj`` into a
:class:`CLIContext`: configuration is read once, ``--set`` overrides are
merged, logging starts, and the ``--traceback`` choice is handed to
lib_cli_exit_tools for the error report in :mod:`.main`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

from url_value import __init__conf__
from url_value.adapters.config.overrides import apply_overrides

from .commands import cli_config, cli_example, cli_info, cli_show
from .context import CLICK_CONTEXT_SETTINGS, CLIContext

if TYPE_CHECKING:
    from url_value.composition import AppServices


def _load_context(
    services_factory: Callable[[], AppServices],
    profile: str | None,
    set_overrides: tuple[str, ...],
) -> CLIContext:
    services = services_factory()
    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc
    services.init_logging(config)
    return CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from profile/<NAME>/ (e.g. 'staging')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeatable (e.g. display.output_format=json)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once and share it with the subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from url_value.composition import build_testing
        >>> print(CliRunner().invoke(cli, ["--version"], obj=build_testing).output)
        url-value version ...
    """
    services_factory = ctx.obj
    if not callable(services_factory):
        raise RuntimeError("url-value needs a services factory in ctx.obj; pass build_production")

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.obj = _load_context(services_factory, profile, tuple(set_overrides))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_show, cli_example, cli_config, cli_info):
    cli.add_command(_command)


__all__ = ["cli"]
