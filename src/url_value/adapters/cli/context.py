"""State shared from the root group with every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from url_value.composition import AppServices

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration and services loaded once by the root group.

    Attributes:
        config: Configuration with root ``--set`` overrides applied.
        services: Port implementations built from the services factory.
        profile: Root ``--profile`` value.
        set_overrides: Raw ``--set`` strings, kept so a subcommand that
            reloads another profile can reapply them.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the CLIContext the root group placed on the context chain.

    Raises:
        RuntimeError: If the command was invoked outside the root group.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError(f"'{ctx.info_name}' must be invoked through the url-value root group")
    return cli_ctx


__all__ = ["CLICK_CONTEXT_SETTINGS", "CLIContext", "get_cli_context"]
