"""``[paramcore]`` configuration section: validation and application to a store.

Contents:
    * :func:`parse_mode` - integer or octal-string permission modes.
    * :class:`ParamcoreSettingsModel` - pydantic boundary model.
    * :func:`load_settings` - extract and validate the section from a Config.
    * :func:`apply_settings` - push validated settings into a ParameterStore.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator

from paramcore.application.directories import DEFAULT_DIRECTORY_MODE
from paramcore.application.parameters import ParameterStore
from paramcore.domain.enums import LogLevel, ReservedName

logger = logging.getLogger(__name__)

SECTION = "paramcore"


def parse_mode(value: int | str, default: int = DEFAULT_DIRECTORY_MODE) -> int:
    """Parse a permission mode given as an integer or octal string.

    Unparseable strings fall back to ``default`` with a warning.

    Example:
        >>> parse_mode(493)
        493
        >>> parse_mode("0o750")
        488
        >>> parse_mode("750")
        488
        >>> oct(parse_mode("rwx"))
        '0o755'
    """
    if isinstance(value, int):
        return value
    try:
        if value.startswith("0o"):
            return int(value, 0)
        return int(value, 8)
    except ValueError:
        logger.warning("Invalid permission mode '%s', falling back to default %o", value, default)
        return default


def _no_destinations() -> list[str]:
    return []


def _no_parameters() -> dict[str, Any]:
    return {}


class ParamcoreSettingsModel(BaseModel):
    """Pydantic model for the ``[paramcore]`` section.

    Example:
        >>> settings = ParamcoreSettingsModel.model_validate({"loglevel": "INFO", "directory_mode": "700"})
        >>> settings.loglevel
        <LogLevel.INFO: 'info'>
        >>> oct(settings.directory_mode)
        '0o700'
        >>> settings.logdest
        []
    """

    debug: bool = False
    loglevel: LogLevel | None = None
    logdest: list[str] = Field(default_factory=_no_destinations)
    directory_mode: int = DEFAULT_DIRECTORY_MODE
    parameters: dict[str, Any] = Field(default_factory=_no_parameters)

    model_config = ConfigDict(extra="ignore")

    @field_validator("loglevel", mode="before")
    @classmethod
    def _lowercase_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("logdest", mode="before")
    @classmethod
    def _single_destination(cls, value: object) -> object:
        return [value] if isinstance(value, str) else value

    @field_validator("directory_mode", mode="before")
    @classmethod
    def _octal_mode(cls, value: object) -> object:
        return parse_mode(value) if isinstance(value, str) else value


def load_settings(config: Config) -> ParamcoreSettingsModel:
    """Validate the ``[paramcore]`` section of ``config``.

    Raises:
        pydantic.ValidationError: If the section is malformed.

    Example:
        >>> load_settings(Config({}, {})).debug
        False
    """
    raw: object = config.get(SECTION, default={})
    return ParamcoreSettingsModel.model_validate(cast("dict[str, Any]", raw) if raw else {})


def apply_settings(store: ParameterStore, settings: ParamcoreSettingsModel) -> None:
    """Apply validated settings to ``store``.

    Parameter assignments go first; then the reserved logging parameters, so a
    ``debug = true`` in the section wins over an explicit ``loglevel``.
    """
    for name, value in settings.parameters.items():
        store.set(name, value)
    if settings.loglevel is not None:
        store.set(ReservedName.LOGLEVEL, settings.loglevel)
    if settings.debug:
        store.set(ReservedName.DEBUG, True)
    for destination in settings.logdest:
        store.set(ReservedName.LOGDEST, destination)
    logger.debug(
        "Applied configuration section",
        extra={"parameters": sorted(settings.parameters), "destinations": settings.logdest},
    )


__all__ = [
    "ParamcoreSettingsModel",
    "SECTION",
    "apply_settings",
    "load_settings",
    "parse_mode",
]
