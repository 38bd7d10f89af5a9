"""Domain layer - pure configuration logic with no I/O or framework dependencies.

Contents:
    * :mod:`.defaults` - Default tree and the ``Literal | Computed | Reference`` shapes
    * :mod:`.enums` - Domain enumerations (LogLevel, ReservedName, ...)
    * :mod:`.errors` - Domain exception types
    * :mod:`.names` - Parameter/type name normalisation
    * :mod:`.type_registry` - Named type descriptors
"""

from __future__ import annotations

from .defaults import (
    Computed,
    DefaultTree,
    DefaultValue,
    Literal,
    Reference,
    build_default_tree,
    classify_default,
)
from .enums import DirectoryStatus, LogLevel, OutputFormat, ReservedName
from .errors import (
    CyclicDefaultError,
    DevError,
    InvalidArgumentError,
    InvalidDefaultError,
    ParamcoreError,
    PathConflictError,
    UnknownBaseParameterError,
    UnknownParameterError,
    UnknownTypeError,
    UnknownUserError,
)
from .names import normalize_name
from .type_registry import ROOT_TYPE, TypeDefinition, TypeDescriptor, TypeRegistry

__all__ = [
    # Defaults
    "Computed",
    "DefaultTree",
    "DefaultValue",
    "Literal",
    "Reference",
    "build_default_tree",
    "classify_default",
    # Enums
    "DirectoryStatus",
    "LogLevel",
    "OutputFormat",
    "ReservedName",
    # Errors
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
    # Names
    "normalize_name",
    # Types
    "ROOT_TYPE",
    "TypeDefinition",
    "TypeDescriptor",
    "TypeRegistry",
]
