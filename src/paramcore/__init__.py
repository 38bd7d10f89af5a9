"""Public package surface exposing the configuration core.

Routes imports through the architectural layers:
- Domain exports: default tree shapes, type registry, errors
- Application exports: parameter store, directory creation, impersonation
- Composition exports: wired configuration contexts
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info, version

# Application exports
from .application import (
    ConfigurationContext,
    ParameterStore,
    as_user,
    ensure_directory,
    impersonate,
)

# Composition exports (wired adapters)
from .composition import build_memory_context, build_production_context

# Domain exports
from .domain import (
    ROOT_TYPE,
    Computed,
    DefaultTree,
    Literal,
    LogLevel,
    ParamcoreError,
    Reference,
    TypeDefinition,
    TypeDescriptor,
    TypeRegistry,
    build_default_tree,
)

__all__ = [
    "ROOT_TYPE",
    "Computed",
    "ConfigurationContext",
    "DefaultTree",
    "Literal",
    "LogLevel",
    "ParamcoreError",
    "ParameterStore",
    "Reference",
    "TypeDefinition",
    "TypeDescriptor",
    "TypeRegistry",
    "as_user",
    "build_default_tree",
    "build_memory_context",
    "build_production_context",
    "ensure_directory",
    "impersonate",
    "print_info",
    "version",
]
