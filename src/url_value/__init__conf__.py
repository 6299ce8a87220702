"""Static package metadata surfaced by ``url-value info`` and ``--version``.

Keep these values in sync with ``[project]`` in ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "url_value"
title: Final[str] = "Compose and display URLs from a protocol and a resource"
version: Final[str] = "1.0.0"
author: Final[str] = "url-value maintainers"
shell_command: Final[str] = "url-value"

#: lib_layered_config identifiers; they select the platform config directories.
LAYEREDCONF_VENDOR: Final[str] = "url-value"
LAYEREDCONF_APP: Final[str] = "url-value"
LAYEREDCONF_SLUG: Final[str] = "url-value"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for url_value:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
