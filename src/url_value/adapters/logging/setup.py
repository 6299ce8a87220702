"""lib_log_rich runtime initialization shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - validated ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialization.

System Role:
    Console script, ``python -m url_value`` and tests all delegate here, so
    the runtime is configured the same way whichever path starts the process.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from url_value import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the [lib_log_rich] config section.

    Unknown keys are kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="urls", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'urls', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the package name when not configured.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once per process and bridge stdlib logging.

    Later calls return immediately. The first call also enables ``.env``
    discovery so ``LOG_*`` variables from a local ``.env`` take effect.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
