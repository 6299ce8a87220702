"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration value is present but malformed, for example
    an unknown ``[display].output_format``. Caught at the CLI boundary to
    provide a user-friendly message.

    Example:
        >>> from url_value.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unknown output format: yaml")
        >>> str(err)
        'Unknown output format: yaml'
    """


class InvalidUrlPartError(TypeError):
    """A URL part was not text.

    Any ``str`` is a legal protocol or resource, including the empty string.
    Inherits from TypeError since the failure is about the argument's type,
    never its content.

    Example:
        >>> from url_value.domain.errors import InvalidUrlPartError
        >>> err = InvalidUrlPartError("protocol must be str, got NoneType")
        >>> isinstance(err, TypeError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidUrlPartError",
]
