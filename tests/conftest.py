"""Fixtures shared by the url-value test modules.

Every test starts with tracebacks off and an empty configuration cache, so
neither ``--traceback`` nor a cached ``get_config`` leaks between tests.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from url_value.adapters.config.loader import clear_config_cache
from url_value.adapters.memory import DisplaySpy
from url_value.composition import AppServices, build_production

_PROJECT_ENV = Path(__file__).resolve().parent.parent / ".env"
if _PROJECT_ENV.is_file():
    load_dotenv(_PROJECT_ENV)

_ANSI_SEQUENCE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture(autouse=True)
def _tracebacks_off() -> Iterator[None]:
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    yield
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


@pytest.fixture(autouse=True)
def _fresh_config_cache() -> None:
    clear_config_cache()


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner; compare exact output against ``result.stdout``, logs go to stderr."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour escape sequences from captured terminal text."""
    return lambda text: _ANSI_SEQUENCE.sub("", text)


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config from plain data, without provenance."""
    return lambda data: Config(data, {})


@pytest.fixture
def source_info_factory() -> Callable[..., SourceInfo]:
    """Build provenance entries for Config metadata."""

    def _source(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _source


@dataclass
class Wiring:
    """A services factory for ``obj=`` plus what its fake ports saw.

    Attributes:
        factory: Pass as ``obj=`` to CliRunner or as ``services_factory=`` to ``main``.
        spy: Every URL the commands displayed (unless wired to stdout).
        requested_profiles: The ``profile`` argument of each ``get_config`` call.
    """

    factory: Callable[[], AppServices]
    spy: DisplaySpy
    requested_profiles: list[str | None]


@pytest.fixture
def wire() -> Callable[..., Wiring]:
    """Wire services around an in-memory configuration.

    Config display and logging stay production. URL display goes to a
    DisplaySpy, or to real stdout with ``to_stdout=True``.

    Example:
        def test_show(cli_runner, wire) -> None:
            wiring = wire({"display": {"output_format": "json"}})
            cli_runner.invoke(cli, ["show", "http", "example.org"], obj=wiring.factory)
            assert wiring.spy.displayed == [UrlValue("http", "example.org")]
    """

    def _wire(config_data: dict[str, Any] | None = None, *, to_stdout: bool = False) -> Wiring:
        config = Config(config_data or {}, {})
        spy = DisplaySpy()
        requested: list[str | None] = []
        production = build_production()

        def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            requested.append(profile)
            return config

        services = AppServices(
            get_config=_get_config,
            display_config=production.display_config,
            display_url=production.display_url if to_stdout else spy.display_url,
            init_logging=production.init_logging,
        )
        return Wiring(factory=lambda: services, spy=spy, requested_profiles=requested)

    return _wire
