"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
    * :func:`exit_code_for`: map a domain error onto an exit code.
"""

from __future__ import annotations

from enum import IntEnum

from paramcore.domain.errors import (
    CyclicDefaultError,
    InvalidArgumentError,
    InvalidDefaultError,
    ParamcoreError,
    PathConflictError,
    UnknownBaseParameterError,
    UnknownParameterError,
    UnknownUserError,
)


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    FILE_EXISTS = 17
    INVALID_ARGUMENT = 22
    NO_USER = 67
    CONFIG_ERROR = 78
    SIGNAL_INT = 130


_ERROR_CODES: tuple[tuple[type[ParamcoreError], ExitCode], ...] = (
    (UnknownUserError, ExitCode.NO_USER),
    (PathConflictError, ExitCode.FILE_EXISTS),
    (UnknownParameterError, ExitCode.CONFIG_ERROR),
    (UnknownBaseParameterError, ExitCode.CONFIG_ERROR),
    (InvalidDefaultError, ExitCode.CONFIG_ERROR),
    (CyclicDefaultError, ExitCode.CONFIG_ERROR),
    (InvalidArgumentError, ExitCode.INVALID_ARGUMENT),
)


def exit_code_for(error: ParamcoreError) -> ExitCode:
    """Return the exit code reported for ``error``.

    Example:
        >>> exit_code_for(UnknownUserError("nobody"))
        <ExitCode.NO_USER: 67>
    """
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
