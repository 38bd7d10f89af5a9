"""Centralized logging initialization for all entry points.

Configures the lib_log_rich runtime once from the ``[lib_log_rich]`` section
of the layered configuration and bridges stdlib logging into it, so the
package logger driven by :class:`StdLoggingController` reaches the same
console and backends.

Contents:
    * :class:`LoggingConfigModel` – boundary validation of the config section.
    * :func:`init_logging` – idempotent logging initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from paramcore import __init__conf__

from .controller import register_level_names


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through untouched to ``lib_log_rich.RuntimeConfig``.

    Example:
        >>> model = LoggingConfigModel(service="agent", environment="staging")
        >>> model.service
        'agent'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Safe to call repeatedly: the first call loads ``.env`` files (making
    ``LOG_*`` variables visible), initializes the runtime and attaches stdlib
    logging; later calls return immediately.

    Args:
        config: Loaded layered configuration; only ``[lib_log_rich]`` is read.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    register_level_names()
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
