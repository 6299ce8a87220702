"""``config`` command: show the merged configuration with its provenance."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from url_value.adapters.config.overrides import apply_overrides
from url_value.domain.enums import OutputFormat

from ..context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context
from ..exit_codes import CommandError, ExitCode

logger = logging.getLogger(__name__)


def _config_for(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Use the root configuration unless *profile* asks for another one.

    A reloaded profile gets the root ``--set`` overrides applied again.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with provenance comments) or json",
)
@click.option("--section", default=None, help="Show one top-level section only (e.g. 'display')")
@click.option("--profile", default=None, help="Show this profile instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration url-value would use.

    Sources, lowest to highest precedence: defaults, app, host, user,
    .env, environment, then --set.
    """
    config, shown_profile = _config_for(get_cli_context(ctx), profile)
    fmt = OutputFormat(output_format)

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"section": section, "format": fmt.value})
        try:
            get_cli_context(ctx).services.display_config(
                config, output_format=fmt, section=section, profile=shown_profile
            )
        except ValueError as exc:
            raise CommandError(str(exc), ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
