"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the built-in display default."""
    return Config({"display": {"output_format": OutputFormat.HUMAN.value}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Do nothing; stands in for display_config."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
