"""Shared pytest fixtures for store, collaborator and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from paramcore.adapters.memory import FakeIdentity, InMemoryFilesystem, InMemoryLogging
from paramcore.application.context import ConfigurationContext
from paramcore.application.parameters import ParameterStore
from paramcore.domain.defaults import build_default_tree

if TYPE_CHECKING:
    from paramcore.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

FAKE_HOME = Path("/home/tester")


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def logging_spy() -> InMemoryLogging:
    """Provide a fresh in-memory logging collaborator starting at ``notice``."""
    return InMemoryLogging()


@pytest.fixture
def memory_filesystem() -> InMemoryFilesystem:
    """Provide an in-memory filesystem containing only ``/`` and ``/tmp``."""
    fs = InMemoryFilesystem()
    fs.add_dir("/tmp")
    return fs


@pytest.fixture
def fake_identity() -> FakeIdentity:
    """Provide an unprivileged identity (uid 1000) that knows root and two users."""
    return FakeIdentity(users={"root": 0, "alice": 1000, "bob": 1001}, euid=1000)


@pytest.fixture
def store(logging_spy: InMemoryLogging) -> ParameterStore:
    """Provide a store over the privileged built-in defaults."""
    return ParameterStore(build_default_tree(privileged=True), logging_spy)


@pytest.fixture
def unprivileged_store(logging_spy: InMemoryLogging) -> ParameterStore:
    """Provide a store over unprivileged defaults rooted at :data:`FAKE_HOME`."""
    return ParameterStore(build_default_tree(privileged=False, home=FAKE_HOME), logging_spy)


@pytest.fixture
def memory_context(
    store: ParameterStore,
    logging_spy: InMemoryLogging,
    memory_filesystem: InMemoryFilesystem,
    fake_identity: FakeIdentity,
) -> ConfigurationContext:
    """Provide a configuration context wired entirely to in-memory collaborators."""
    return ConfigurationContext(
        parameters=store,
        logging=logging_spy,
        filesystem=memory_filesystem,
        identity=fake_identity,
        privileged=True,
    )


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory for CLI invocations."""
    from paramcore.composition import build_testing

    return build_testing


@pytest.fixture
def config_cli_context() -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory building in-memory services around an injected Config.

    Example:
        def test_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"paramcore": {"parameters": {"server": "x"}}})
            result = cli_runner.invoke(cli, ["get", "server"], obj=factory)
            assert result.output == "x\\n"
    """
    from paramcore.composition import AppServices, build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        base = build_testing()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            init_logging=base.init_logging,
            build_context=base.build_context,
            display_parameters=base.display_parameters,
        )
        return lambda: services

    return _create
