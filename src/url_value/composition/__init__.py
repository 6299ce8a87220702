"""Composition root: the one place that picks adapters for each port.

Contents:
    * :class:`AppServices` - The services a CLI run uses.
    * :func:`build_production` - Real configuration, stdout and lib_log_rich.
    * :func:`build_testing` - In-memory configuration and a :class:`DisplaySpy`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.output.console import display_url

if TYPE_CHECKING:
    from ..adapters.memory.output import DisplaySpy
    from ..application.ports import DisplayConfig, DisplayUrl, GetConfig, InitLogging

    # pyright checks each production adapter against its port here.
    _get_config: GetConfig = get_config
    _display_config: DisplayConfig = display_config
    _display_url: DisplayUrl = display_url
    _init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI through ``ctx.obj``."""

    get_config: GetConfig
    display_config: DisplayConfig
    display_url: DisplayUrl
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services for the installed console script."""
    return AppServices(get_config, display_config, display_url, init_logging)


def build_testing(*, spy: DisplaySpy | None = None) -> AppServices:
    """Services that touch neither files nor stdout.

    Pass *spy* to inspect what was displayed; a fresh one is used otherwise.

    Example:
        >>> from url_value.adapters.memory import DisplaySpy
        >>> from url_value.domain.url import UrlValue
        >>> spy = DisplaySpy()
        >>> build_testing(spy=spy).display_url(UrlValue("http", "example.org"))
        >>> spy.lines
        ['http://example.org']
    """
    from ..adapters.memory import (
        DisplaySpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        display_url=(spy or DisplaySpy()).display_url,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "display_url",
    "get_config",
    "init_logging",
]
