"""``--set SECTION.KEY=VALUE`` overrides layered on top of loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values a raw override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: Missing ``=``, missing dot, or an empty path component.

    Examples:
        >>> parse_override("display.output_format=json")
        ConfigOverride(section='display', key_path=('output_format',), value='json')

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, falling back to the literal string.

    Examples:
        >>> coerce_value("false"), coerce_value("10"), coerce_value("null")
        (False, 10, None)
        >>> coerce_value("json")
        'json'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place *override* into the nested *tree*, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` override deep-merged in.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"display": {"output_format": "human"}}, {})
        >>> apply_overrides(cfg, ("display.output_format=json",)).get("display.output_format")
        'json'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
