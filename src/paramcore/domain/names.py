"""Parameter and type name normalisation."""

from __future__ import annotations

import sys
from enum import Enum

from .errors import InvalidArgumentError


def normalize_name(name: object) -> str:
    """Return the canonical interned form of a parameter or type name.

    Plain strings and ``str``-valued enum members address the same entry, so
    ``"debug"`` and ``ReservedName.DEBUG`` are interchangeable keys.

    Args:
        name: Candidate name.

    Returns:
        Interned string key.

    Raises:
        InvalidArgumentError: If ``name`` is not a string.

    Example:
        >>> from paramcore.domain.enums import ReservedName
        >>> normalize_name(ReservedName.DEBUG)
        'debug'
        >>> normalize_name("logdir") is normalize_name("".join(["log", "dir"]))
        True
        >>> normalize_name(42)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidArgumentError: Invalid parameter type int
    """
    if isinstance(name, Enum) and isinstance(name.value, str):
        return sys.intern(name.value)
    if isinstance(name, str):
        return sys.intern(str(name))
    raise InvalidArgumentError(f"Invalid parameter type {type(name).__name__}")


__all__ = ["normalize_name"]
