"""Display settings read from the ``[display]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from url_value.domain.enums import OutputFormat
from url_value.domain.errors import ConfigurationError


class DisplayConfigModel(BaseModel):
    """Pydantic model for [display] config section validation.

    Example:
        >>> DisplayConfigModel().output_format
        <OutputFormat.HUMAN: 'human'>
        >>> DisplayConfigModel(output_format="JSON").output_format
        <OutputFormat.JSON: 'json'>
    """

    output_format: OutputFormat = OutputFormat.HUMAN

    model_config = ConfigDict(extra="ignore")

    @field_validator("output_format", mode="before")
    @classmethod
    def _lowercase_format(cls, value: object) -> object:
        """Match ``--format``, which accepts any case."""
        return value.lower() if isinstance(value, str) else value


def load_display_settings(config: Config) -> DisplayConfigModel:
    """Parse the ``[display]`` section into a typed model.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Validated display settings; defaults when the section is absent.

    Raises:
        ConfigurationError: If the section holds an invalid value.

    Example:
        >>> load_display_settings(Config({"display": {"output_format": "json"}}, {})).output_format.value
        'json'
        >>> load_display_settings(Config({}, {})).output_format.value
        'human'
    """
    raw: object = config.get("display", default={})
    try:
        return DisplayConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [display] configuration: {exc.errors()[0]['msg']}") from exc


def resolve_output_format(config: Config, requested: str | None) -> OutputFormat:
    """Return the explicit *requested* format, else the configured default.

    Example:
        >>> resolve_output_format(Config({}, {}), "JSON")
        <OutputFormat.JSON: 'json'>
        >>> resolve_output_format(Config({"display": {"output_format": "json"}}, {}), None)
        <OutputFormat.JSON: 'json'>
    """
    if requested:
        return OutputFormat(requested.lower())
    return load_display_settings(config).output_format


__all__ = [
    "DisplayConfigModel",
    "load_display_settings",
    "resolve_output_format",
]
