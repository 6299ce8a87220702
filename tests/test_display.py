"""Config display wrapper: delegation to lib_layered_config and error paths."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from url_value.adapters.config.display import display_config
from url_value.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Requesting a missing section raises ValueError in every format."""
    config = config_factory({"display": {"output_format": "human"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_shows_display_section(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output is TOML-like."""
    display_config(Config({"display": {"output_format": "json"}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[display]" in output
    assert 'output_format = "json"' in output


@pytest.mark.os_agnostic
def test_display_json_shows_display_section(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output carries section and key."""
    display_config(Config({"display": {"output_format": "human"}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"display"' in output
    assert '"output_format": "human"' in output


@pytest.mark.os_agnostic
def test_display_human_renders_profile_in_provenance(
    capsys: pytest.CaptureFixture[str],
    source_info_factory: Callable[..., SourceInfo],
) -> None:
    """Profile name passes through to the provenance comments."""
    metadata: dict[str, SourceInfo] = {
        "display.output_format": source_info_factory(
            "display.output_format", "user", "/home/user/.config/url-value/config.toml"
        ),
    }
    config = Config({"display": {"output_format": "json"}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    assert "# layer:user profile:production" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_config_shows_section_with_false_value(capsys: pytest.CaptureFixture[str]) -> None:
    """A section whose only value is falsey is still found."""
    display_config(Config({"lib_log_rich": {"force_color": False}}, {}), section="lib_log_rich")

    assert "force_color = false" in capsys.readouterr().out
