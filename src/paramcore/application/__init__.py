"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocols for the logging, filesystem and identity collaborators
    * :mod:`.parameters` - Parameter store (overlay over the default tree)
    * :mod:`.directories` - Recursive directory creation
    * :mod:`.impersonation` - Temporary effective-uid switching
    * :mod:`.context` - Explicit configuration context
"""

from __future__ import annotations

from .context import ConfigurationContext
from .directories import DEFAULT_DIRECTORY_MODE, ensure_directory
from .impersonation import as_user, impersonate, resolve_uid
from .parameters import ParameterStore, ReservedParameter
from .ports import (
    BuildContext,
    DisplayParameters,
    FilesystemPort,
    GetConfig,
    IdentityPort,
    InitLogging,
    LoggingPort,
)

__all__ = [
    "BuildContext",
    "ConfigurationContext",
    "DEFAULT_DIRECTORY_MODE",
    "DisplayParameters",
    "FilesystemPort",
    "GetConfig",
    "IdentityPort",
    "InitLogging",
    "LoggingPort",
    "ParameterStore",
    "ReservedParameter",
    "as_user",
    "ensure_directory",
    "impersonate",
    "resolve_uid",
]
