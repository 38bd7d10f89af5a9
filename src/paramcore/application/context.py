"""Explicit configuration context handed to components that need configuration.

Bundles one parameter store, one type registry and the collaborators they
drive, so callers never reach for a process-wide singleton. Built by
:func:`paramcore.composition.build_context`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TypeVar

from ..domain.enums import DirectoryStatus, LogLevel
from ..domain.type_registry import TypeRegistry
from .directories import DEFAULT_DIRECTORY_MODE, ensure_directory
from .impersonation import as_user
from .parameters import ParameterStore
from .ports import FilesystemPort, IdentityPort, LoggingPort

T = TypeVar("T")


@dataclass(slots=True)
class ConfigurationContext:
    """Everything the host application needs to read and act on configuration.

    Attributes:
        parameters: Overlay and default tree.
        types: Named type registry.
        logging: Logging collaborator driven by reserved parameters.
        filesystem: Filesystem collaborator used for directory creation.
        identity: OS identity collaborator used for impersonation.
        privileged: Whether the default tree was rooted at system locations.
        directory_mode: Mode used when :meth:`ensure_directory` gets none.
    """

    parameters: ParameterStore
    logging: LoggingPort
    filesystem: FilesystemPort
    identity: IdentityPort
    privileged: bool = False
    types: TypeRegistry = field(default_factory=TypeRegistry)
    directory_mode: int = DEFAULT_DIRECTORY_MODE

    def ensure_directory(self, target: str | PurePath, mode: int | None = None) -> DirectoryStatus:
        """Create a directory given either a path or a parameter name.

        A string naming a known parameter is resolved first, so
        ``ensure_directory("logdir")`` creates whatever ``logdir`` resolves to.
        """
        path = target
        if isinstance(target, str) and target in self.parameters and not self.parameters.is_reserved(target):
            path = str(self.parameters.get(target))
        effective_mode = self.directory_mode if mode is None else mode
        return ensure_directory(path, effective_mode, filesystem=self.filesystem)

    def as_user(self, work: Callable[[], T], username: str | None = None) -> T:
        """Run ``work`` as ``username``, defaulting to the ``user`` parameter."""
        target = username if username is not None else str(self.parameters.get("user"))
        return as_user(target, work, identity=self.identity)

    def log(self, level: LogLevel | str, message: str | Sequence[str]) -> None:
        """Emit ``message`` at ``level``; a sequence of parts is joined with spaces."""
        text = message if isinstance(message, str) else " ".join(str(part) for part in message)
        self.logging.emit(level, text)


__all__ = ["ConfigurationContext"]
