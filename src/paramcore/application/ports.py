"""Application ports: Protocol definitions for the external collaborators.

The configuration core never talks to the logging framework, the filesystem
or the OS identity layer directly. Production adapters and in-memory test
adapters satisfy these protocols through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Adapter modules import nothing from
    here at runtime; conformance is asserted statically in the composition
    root.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import LogLevel, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .context import ConfigurationContext
    from .parameters import ParameterStore


class LoggingPort(Protocol):
    """Logging collaborator driven by the reserved ``debug``/``loglevel``/``logdest`` parameters."""

    @property
    def debug_level(self) -> LogLevel: ...

    @property
    def default_level(self) -> LogLevel: ...

    def levels(self) -> Sequence[LogLevel]: ...

    def current_level(self) -> LogLevel: ...

    def set_level(self, level: LogLevel | str) -> None: ...

    def add_destination(self, sink: object) -> None: ...

    def emit(self, level: LogLevel | str, message: str) -> None: ...


class FilesystemPort(Protocol):
    """Filesystem primitives needed for recursive directory creation."""

    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def mkdir(self, path: str, mode: int) -> None: ...

    def join(self, *parts: str) -> str: ...


class IdentityPort(Protocol):
    """OS identity layer used by the impersonation helper.

    ``lookup_uid`` raises ``LookupError`` (``KeyError`` on POSIX) for unknown
    users.
    """

    def lookup_uid(self, username: str) -> int: ...

    def effective_uid(self) -> int: ...

    def set_effective_uid(self, uid: int) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class BuildContext(Protocol):
    """Build a configuration context seeded from layered configuration."""

    def __call__(self, config: Config) -> ConfigurationContext: ...


class DisplayParameters(Protocol):
    """Display resolved parameters in the requested format."""

    def __call__(
        self,
        store: ParameterStore,
        *,
        output_format: OutputFormat = ...,
        names: tuple[str, ...] = ...,
    ) -> None: ...


__all__ = [
    "BuildContext",
    "DisplayParameters",
    "FilesystemPort",
    "GetConfig",
    "IdentityPort",
    "InitLogging",
    "LoggingPort",
]
