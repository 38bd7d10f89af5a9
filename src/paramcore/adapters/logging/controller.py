"""Logging collaborator backed by a stdlib ``logging`` logger.

The reserved ``debug``/``loglevel``/``logdest`` parameters drive this
controller. Records flow through the package logger, so once
:func:`paramcore.adapters.logging.setup.init_logging` has bridged stdlib
logging into lib_log_rich they also reach the lib_log_rich console and
backends.

Contents:
    * :func:`register_level_names` - teach stdlib logging the extra level names.
    * :class:`StdLoggingController` - the :class:`LoggingPort` implementation.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from paramcore import __init__conf__
from paramcore.domain.enums import LogLevel
from paramcore.domain.errors import InvalidArgumentError

#: Format applied to handlers created from destination names.
DESTINATION_FORMAT = "%(asctime)s %(name)s (%(levelname)s): %(message)s"

_SYSLOG_SOCKET = "/dev/log"


def register_level_names() -> None:
    """Register every :class:`LogLevel` name with stdlib logging.

    Example:
        >>> register_level_names()
        >>> logging.getLevelName(25)
        'NOTICE'
    """
    for level in LogLevel:
        logging.addLevelName(level.numeric, level.value.upper())


class StdLoggingController:
    """:class:`LoggingPort` implementation on top of one stdlib logger.

    Args:
        logger_name: Logger whose level and handlers are managed. Defaults to
            the package logger so every module logger inherits the level.

    Example:
        >>> controller = StdLoggingController("paramcore.doctest")
        >>> controller.set_level("debug")
        >>> controller.current_level()
        <LogLevel.DEBUG: 'debug'>
    """

    def __init__(self, logger_name: str = __init__conf__.name) -> None:
        register_level_names()
        self._logger = logging.getLogger(logger_name)
        if self._logger.level == logging.NOTSET:
            self._logger.setLevel(self.default_level.numeric)
        self._handlers: list[logging.Handler] = []

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def debug_level(self) -> LogLevel:
        return LogLevel.DEBUG

    @property
    def default_level(self) -> LogLevel:
        return LogLevel.NOTICE

    @property
    def handlers(self) -> tuple[logging.Handler, ...]:
        """Handlers added through :meth:`add_destination`."""
        return tuple(self._handlers)

    def levels(self) -> Sequence[LogLevel]:
        return tuple(LogLevel)

    def current_level(self) -> LogLevel:
        return LogLevel.from_numeric(self._logger.getEffectiveLevel())

    def set_level(self, level: LogLevel | str) -> None:
        self._logger.setLevel(LogLevel.parse(level).numeric)

    def add_destination(self, sink: object) -> None:
        """Attach a new destination.

        Accepts a ready :class:`logging.Handler`, ``"console"``, ``"syslog"``
        or a file path.

        Raises:
            InvalidArgumentError: If ``sink`` is none of the above.
        """
        handler = self._build_handler(sink)
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(DESTINATION_FORMAT))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def emit(self, level: LogLevel | str, message: str) -> None:
        self._logger.log(LogLevel.parse(level).numeric, message)

    def close(self) -> None:
        """Detach and close every handler added through :meth:`add_destination`."""
        while self._handlers:
            handler = self._handlers.pop()
            self._logger.removeHandler(handler)
            handler.close()

    def _build_handler(self, sink: object) -> logging.Handler:
        if isinstance(sink, logging.Handler):
            return sink
        if sink == "console":
            return logging.StreamHandler(sys.stderr)
        if sink == "syslog":
            if Path(_SYSLOG_SOCKET).exists():
                return logging.handlers.SysLogHandler(address=_SYSLOG_SOCKET)
            return logging.handlers.SysLogHandler()
        if isinstance(sink, str | os.PathLike):
            return logging.FileHandler(os.fspath(sink), encoding="utf-8")
        raise InvalidArgumentError(f"Invalid log destination {sink!r}")


__all__ = ["DESTINATION_FORMAT", "StdLoggingController", "register_level_names"]
