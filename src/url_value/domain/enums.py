"""Type-safe domain enums for output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for URL and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Plain rendered text (URLs) or TOML-like output (configuration).
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
]
