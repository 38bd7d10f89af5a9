"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Sequence


class ParamcoreError(Exception):
    """Base class for every error raised by the configuration core.

    Carries optional ``file`` and ``line`` attributes so callers that load
    parameters from files can attach a location. The location is folded into
    ``str()`` when present.

    Example:
        >>> str(ParamcoreError("bad value"))
        'bad value'
        >>> str(ParamcoreError("bad value", file="site.pp", line=3))
        'bad value in file site.pp at line 3'
        >>> str(ParamcoreError("bad value", line=3))
        'bad value at line 3'
    """

    def __init__(self, message: str, *, file: str | None = None, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line

    def __str__(self) -> str:
        if self.file and self.line:
            return f"{self.message} in file {self.file} at line {self.line}"
        if self.line:
            return f"{self.message} at line {self.line}"
        return self.message


class DevError(ParamcoreError):
    """Programming error inside the host application, not a user mistake."""


class InvalidArgumentError(ParamcoreError, TypeError):
    """A parameter name of an unsupported type was supplied.

    Example:
        >>> err = InvalidArgumentError("Invalid parameter type int")
        >>> isinstance(err, TypeError)
        True
    """


class UnknownParameterError(ParamcoreError, KeyError):
    """The parameter is neither overlaid nor defaulted.

    Also a ``KeyError`` so mapping-style callers can catch it naturally.

    Example:
        >>> err = UnknownParameterError("nosuch")
        >>> err.name
        'nosuch'
        >>> str(err)
        'Invalid parameter nosuch'
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid parameter {name}")
        self.name = name


class UnknownBaseParameterError(ParamcoreError):
    """A reference default names a base parameter missing from the default tree."""

    def __init__(self, name: str, base: str) -> None:
        super().__init__(f"Unknown basedir {base} for param {name}")
        self.name = name
        self.base = base


class InvalidDefaultError(ParamcoreError):
    """A reference default is malformed (wrong length, base or suffix type)."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"Invalid default {value!r} for param {name}")
        self.name = name
        self.value = value


class CyclicDefaultError(ParamcoreError):
    """Reference defaults form a loop and can never resolve.

    Example:
        >>> str(CyclicDefaultError(("a", "b", "a")))
        'Cyclic default reference: a -> b -> a'
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__("Cyclic default reference: " + " -> ".join(self.chain))


class PathConflictError(ParamcoreError):
    """Directory creation is blocked by an existing non-directory entry."""

    def __init__(self, path: str, blocker: str) -> None:
        super().__init__(f"Cannot create {path}: basedir {blocker} is a file")
        self.path = path
        self.blocker = blocker


class UnknownUserError(ParamcoreError):
    """The impersonation target does not exist on this host."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User {username} not found")
        self.username = username


class UnknownTypeError(ParamcoreError):
    """A type registration names a parent that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown type {name}")
        self.name = name


__all__ = [
    "CyclicDefaultError",
    "DevError",
    "InvalidArgumentError",
    "InvalidDefaultError",
    "ParamcoreError",
    "PathConflictError",
    "UnknownBaseParameterError",
    "UnknownParameterError",
    "UnknownTypeError",
    "UnknownUserError",
]
