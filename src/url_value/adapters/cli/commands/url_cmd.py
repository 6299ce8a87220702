"""URL construction and display commands.

Contents:
    * :func:`cli_show` - Build a URL from protocol and resource and display it.
    * :func:`cli_example` - Display the reference ``http://www.example.com/index.html``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from url_value.adapters.output.settings import resolve_output_format
from url_value.domain.behaviors import EXAMPLE_URL, build_url
from url_value.domain.enums import OutputFormat
from url_value.domain.errors import ConfigurationError
from url_value.domain.url import UrlValue

from ..context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context

logger = logging.getLogger(__name__)

_FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format; defaults to [display].output_format from configuration",
)


def _display(cli_ctx: CLIContext, url: UrlValue, requested_format: str | None) -> None:
    """Resolve the output format and hand *url* to the display service.

    Raises:
        ConfigurationError: If ``[display]`` is misconfigured; the runner
            reports it and exits with CONFIG_ERROR.
    """
    try:
        fmt = resolve_output_format(cli_ctx.config, requested_format)
    except ConfigurationError as exc:
        logger.error("Invalid display configuration", extra={"error": str(exc)})
        raise

    logger.info("Displaying URL", extra={"protocol": url.protocol, "format": fmt.value})
    cli_ctx.services.display_url(url, output_format=fmt)


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("protocol")
@click.argument("resource")
@_FORMAT_OPTION
@click.pass_context
def cli_show(ctx: click.Context, protocol: str, resource: str, output_format: str | None) -> None:
    r"""Join PROTOCOL and RESOURCE with "://" and print the result.

    Both arguments are used verbatim; pass "" for an empty part.

    \b
    Example:
        url-value show http www.example.com/index.html
        http://www.example.com/index.html
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-show", extra={"command": "show"}):
        _display(cli_ctx, build_url(protocol, resource), output_format)


@click.command("example", context_settings=CLICK_CONTEXT_SETTINGS)
@_FORMAT_OPTION
@click.pass_context
def cli_example(ctx: click.Context, output_format: str | None) -> None:
    """Print the reference URL http://www.example.com/index.html."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-example", extra={"command": "example"}):
        _display(cli_ctx, EXAMPLE_URL, output_format)


__all__ = ["cli_example", "cli_show"]
