"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no uid switching, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging collaborator and initializer
    * :mod:`.system` - In-memory filesystem and identity collaborators
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import InMemoryLogging, init_logging_in_memory
from .system import FakeIdentity, InMemoryFilesystem

# Static conformance assertions
if TYPE_CHECKING:
    from paramcore.application.ports import (
        FilesystemPort,
        GetConfig,
        IdentityPort,
        InitLogging,
        LoggingPort,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_logging: LoggingPort = InMemoryLogging()
    _assert_filesystem: FilesystemPort = InMemoryFilesystem()
    _assert_identity: IdentityPort = FakeIdentity()

__all__ = [
    "FakeIdentity",
    "InMemoryFilesystem",
    "InMemoryLogging",
    "get_config_in_memory",
    "init_logging_in_memory",
]
