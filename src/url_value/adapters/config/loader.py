"""Read the layered url-value configuration.

Layers, lowest to highest precedence: the bundled ``defaultconfig.toml``,
then app, host and user files, then ``.env``, then ``URL_VALUE___*``
environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from url_value import __init__conf__

DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ValueError: For empty, overlong, reserved or path-like names.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../secrets")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: profile contains invalid characters: ../secrets
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read from disk once per profile.

    Args:
        profile: Inserts ``profile/<name>/`` into every configuration path.
        start_dir: Where ``.env`` discovery starts; the cwd when None.

    Raises:
        ValueError: If *profile* is not a valid profile name.

    Example:
        >>> get_config().get("display.output_format")
        'human'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget cached configuration so the next :func:`get_config` re-reads disk."""
    _read_layers.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "clear_config_cache",
    "get_config",
    "validate_profile",
]
