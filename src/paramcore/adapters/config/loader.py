"""Layered configuration loading.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files found by lib_layered_config, then ``.env`` and the
environment. The ``[paramcore]`` section seeds the parameter store and
``[lib_log_rich]`` configures logging.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from paramcore import __init__conf__

DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaultconfig.toml")


def get_default_config_path() -> Path:
    """Return the bundled defaults file.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return DEFAULT_CONFIG_PATH


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ValueError: For empty, overlong or path-like names.

    Example:
        >>> validate_profile("production")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per ``(profile, start_dir)``.

    Args:
        profile: Inserts ``profile/<name>/`` into every configuration path.
        start_dir: Directory seeding ``.env`` discovery; defaults to the cwd.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("paramcore", default={})["loglevel"]  # doctest: +SKIP
        'notice'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Force the next :func:`get_config` call to read from disk again."""
    _read_layers.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
