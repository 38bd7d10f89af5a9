"""Configuration context: parameter-aware directory creation, impersonation and logging."""

from __future__ import annotations

import pytest

from paramcore.adapters.memory import FakeIdentity, InMemoryFilesystem, InMemoryLogging
from paramcore.application.context import ConfigurationContext
from paramcore.domain.enums import DirectoryStatus, LogLevel
from paramcore.domain.errors import UnknownUserError
from paramcore.domain.type_registry import TypeRegistry


@pytest.mark.os_agnostic
def test_parameter_name_is_resolved_before_creation(memory_context: ConfigurationContext) -> None:
    """ensure_directory('logdir') creates whatever logdir resolves to."""
    memory_context.parameters.set("vardir", "/tmp/agent")

    status = memory_context.ensure_directory("logdir")

    assert status is DirectoryStatus.CREATED
    assert memory_context.filesystem.is_dir("/tmp/agent/log")


@pytest.mark.os_agnostic
def test_plain_path_is_created_as_given(
    memory_context: ConfigurationContext, memory_filesystem: InMemoryFilesystem
) -> None:
    """A string that is not a parameter name is treated as a path."""
    memory_context.ensure_directory("/tmp/plain/dir")

    assert memory_filesystem.created == ["/tmp/plain", "/tmp/plain/dir"]


@pytest.mark.os_agnostic
def test_reserved_name_is_treated_as_a_path(
    memory_context: ConfigurationContext, memory_filesystem: InMemoryFilesystem
) -> None:
    """Reserved names are never resolved into directory locations."""
    memory_filesystem.entries["."] = 0o755

    memory_context.ensure_directory("debug")

    assert memory_filesystem.created == ["debug"]


@pytest.mark.os_agnostic
def test_configured_directory_mode_is_the_fallback(
    memory_context: ConfigurationContext, memory_filesystem: InMemoryFilesystem
) -> None:
    """Without an explicit mode the context's directory_mode applies."""
    memory_context.directory_mode = 0o700

    memory_context.ensure_directory("/tmp/secret")
    memory_context.ensure_directory("/tmp/open", 0o777)

    assert memory_filesystem.entries["/tmp/secret"] == 0o700
    assert memory_filesystem.entries["/tmp/open"] == 0o777


@pytest.mark.os_agnostic
def test_as_user_defaults_to_user_parameter(memory_context: ConfigurationContext) -> None:
    """Without a username the 'user' parameter names the target."""
    memory_context.parameters.set("user", "bob")

    observed = memory_context.as_user(memory_context.identity.effective_uid)

    assert observed == 1001
    assert memory_context.identity.effective_uid() == 1000


@pytest.mark.os_agnostic
def test_as_user_with_default_unknown_user_fails(memory_context: ConfigurationContext) -> None:
    """The built-in user 'paramcore' is unknown to the fake identity table."""
    with pytest.raises(UnknownUserError):
        memory_context.as_user(lambda: None)


@pytest.mark.os_agnostic
def test_log_joins_message_parts(memory_context: ConfigurationContext, logging_spy: InMemoryLogging) -> None:
    """A sequence of parts is emitted as one space-joined message."""
    memory_context.log("warning", ["disk", "almost", "full"])
    memory_context.log(LogLevel.ERR, "plain")

    assert logging_spy.records == [(LogLevel.WARNING, "disk almost full"), (LogLevel.ERR, "plain")]


@pytest.mark.os_agnostic
def test_log_below_current_level_is_dropped(memory_context: ConfigurationContext, logging_spy: InMemoryLogging) -> None:
    """Records under the current level never reach the sink."""
    memory_context.log("info", "quiet")

    assert logging_spy.records == []


@pytest.mark.os_agnostic
def test_debug_parameter_lets_debug_records_through(
    memory_context: ConfigurationContext, logging_spy: InMemoryLogging
) -> None:
    """Setting debug through the store changes what the context emits."""
    memory_context.parameters.set("debug", True)

    memory_context.log("debug", "verbose")

    assert logging_spy.records == [(LogLevel.DEBUG, "verbose")]


@pytest.mark.os_agnostic
def test_each_context_owns_its_registry(
    memory_context: ConfigurationContext,
    logging_spy: InMemoryLogging,
    memory_filesystem: InMemoryFilesystem,
    fake_identity: FakeIdentity,
) -> None:
    """Two contexts never share registered types."""
    other = ConfigurationContext(
        parameters=memory_context.parameters,
        logging=logging_spy,
        filesystem=memory_filesystem,
        identity=fake_identity,
    )

    memory_context.types.register("file")

    assert isinstance(other.types, TypeRegistry)
    assert "file" not in other.types
