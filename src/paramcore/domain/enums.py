"""Type-safe domain enums for log levels, parameter names and outcomes."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError


class OutputFormat(str, Enum):
    """Output format options for parameter display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class LogLevel(str, Enum):
    """Severity levels understood by the logging collaborator.

    Each member maps onto a numeric stdlib ``logging`` level so records can be
    filtered by the standard machinery. ``NOTICE`` sits between ``INFO`` and
    ``WARNING`` and is the level restored when debugging is switched off.

    Members are declared in the historical order (``err, alert, emerg,
    crit``). Numeric severity differs: ``crit`` stays at stdlib ``CRITICAL``
    (50) so stock handlers treat it as critical, ``alert`` (45) sits between
    ``ERROR`` and ``CRITICAL``, and ``emerg`` (60) is the most severe.

    Example:
        >>> LogLevel("notice").numeric
        25
        >>> LogLevel.DEBUG == "debug"
        True
        >>> LogLevel.from_numeric(40)
        <LogLevel.ERR: 'err'>
    """

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERR = "err"
    ALERT = "alert"
    EMERG = "emerg"
    CRIT = "crit"

    @property
    def numeric(self) -> int:
        """Return the stdlib ``logging`` level for this member."""
        return _NUMERIC_LEVELS[self]

    @classmethod
    def parse(cls, value: LogLevel | str) -> LogLevel:
        """Return the member named by ``value`` (case-insensitive).

        Raises:
            InvalidArgumentError: If ``value`` names no level.

        Example:
            >>> LogLevel.parse("DEBUG")
            <LogLevel.DEBUG: 'debug'>
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Invalid loglevel {value!r}")
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid loglevel {value!r}") from exc

    @classmethod
    def from_numeric(cls, value: int) -> LogLevel:
        """Return the most severe member whose numeric level is ``<= value``."""
        best = cls.DEBUG
        for member in cls:
            if member.numeric <= value and member.numeric >= best.numeric:
                best = member
        return best


_NUMERIC_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.NOTICE: 25,
    LogLevel.WARNING: 30,
    LogLevel.ERR: 40,
    LogLevel.ALERT: 45,
    LogLevel.CRIT: 50,
    LogLevel.EMERG: 60,
}


class ReservedName(str, Enum):
    """Parameter names routed to the logging collaborator instead of the overlay.

    Example:
        >>> ReservedName.LOGDEST.value
        'logdest'
    """

    DEBUG = "debug"
    LOGLEVEL = "loglevel"
    LOGDEST = "logdest"


class DirectoryStatus(str, Enum):
    """Outcome reported by :func:`paramcore.application.directories.ensure_directory`.

    Example:
        >>> DirectoryStatus.CREATED == "created"
        True
    """

    CREATED = "created"
    EXISTED = "existed"


__all__ = [
    "DirectoryStatus",
    "LogLevel",
    "OutputFormat",
    "ReservedName",
]
