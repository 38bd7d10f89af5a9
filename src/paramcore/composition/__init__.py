"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lib_layered_config import Config

# Configuration services
from ..adapters.config.display import display_parameters
from ..adapters.config.loader import get_config
from ..adapters.config.settings import apply_settings, load_settings

# Logging services
from ..adapters.logging.controller import StdLoggingController
from ..adapters.logging.setup import init_logging

# System collaborators
from ..adapters.system import LocalFilesystem, PosixIdentity, is_privileged
from ..application.context import ConfigurationContext
from ..application.parameters import ParameterStore
from ..application.ports import FilesystemPort, IdentityPort, LoggingPort
from ..domain.defaults import build_default_tree

# Static conformance assertions: pyright verifies that each adapter
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        BuildContext,
        DisplayParameters,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_display_parameters: DisplayParameters = display_parameters
    _assert_logging: LoggingPort = StdLoggingController()
    _assert_filesystem: FilesystemPort = LocalFilesystem()
    _assert_identity: IdentityPort = PosixIdentity()


def assemble_context(
    config: Config,
    *,
    logging_port: LoggingPort,
    filesystem: FilesystemPort,
    identity: IdentityPort,
    privileged: bool,
    home: Path | None = None,
) -> ConfigurationContext:
    """Build the default tree once, wrap it in a store and apply ``[paramcore]``.

    Args:
        config: Layered configuration; only ``[paramcore]`` is read here.
        logging_port: Logging collaborator driven by reserved parameters.
        filesystem: Filesystem collaborator.
        identity: Identity collaborator.
        privileged: Roots directory defaults at system locations when True.
        home: Home directory for unprivileged roots.

    Raises:
        pydantic.ValidationError: If the ``[paramcore]`` section is malformed.
    """
    settings = load_settings(config)
    store = ParameterStore(build_default_tree(privileged=privileged, home=home), logging_port)
    apply_settings(store, settings)
    return ConfigurationContext(
        parameters=store,
        logging=logging_port,
        filesystem=filesystem,
        identity=identity,
        privileged=privileged,
        directory_mode=settings.directory_mode,
    )


def build_production_context(config: Config) -> ConfigurationContext:
    """Wire real collaborators; the privileged flag is decided here, once."""
    return assemble_context(
        config,
        logging_port=StdLoggingController(),
        filesystem=LocalFilesystem(),
        identity=PosixIdentity(),
        privileged=is_privileged(),
    )


def build_memory_context(config: Config) -> ConfigurationContext:
    """Wire in-memory collaborators rooted at an unprivileged fake home."""
    from ..adapters.memory import FakeIdentity, InMemoryFilesystem, InMemoryLogging

    return assemble_context(
        config,
        logging_port=InMemoryLogging(),
        filesystem=InMemoryFilesystem(),
        identity=FakeIdentity(users={"root": 0, "paramcore": 1000}),
        privileged=False,
        home=Path("/home/paramcore"),
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    build_context: BuildContext
    display_parameters: DisplayParameters


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        build_context=build_production_context,
        display_parameters=display_parameters,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Display still renders through Rich so CLI tests can assert on output.
    """
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        build_context=build_memory_context,
        display_parameters=display_parameters,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_parameters",
    # Logging
    "init_logging",
    # Context
    "assemble_context",
    "build_memory_context",
    "build_production_context",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
