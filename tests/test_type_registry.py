"""Type registry: registration, inheritance and lookup misses."""

from __future__ import annotations

import logging

import pytest

from paramcore.domain.errors import InvalidArgumentError, UnknownTypeError
from paramcore.domain.type_registry import ROOT_TYPE, TypeDefinition, TypeRegistry


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry()


@pytest.mark.os_agnostic
def test_lookup_on_empty_registry_returns_none(registry: TypeRegistry, caplog: pytest.LogCaptureFixture) -> None:
    """A lookup before anything is registered is a miss, not an error."""
    with caplog.at_level(logging.DEBUG, logger="paramcore.domain.type_registry"):
        assert registry.lookup("file") is None

    assert "before any type was registered" in caplog.text


@pytest.mark.os_agnostic
def test_lookup_of_unregistered_name_returns_none(
    registry: TypeRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    """A miss in a populated registry logs a different debug message."""
    registry.register("file")

    with caplog.at_level(logging.DEBUG, logger="paramcore.domain.type_registry"):
        assert registry.lookup("service") is None

    assert "No type registered under service" in caplog.text


@pytest.mark.os_agnostic
def test_registered_type_is_returned_by_lookup(registry: TypeRegistry) -> None:
    """Registration returns the same descriptor later lookups see."""
    descriptor = registry.register("file", TypeDefinition(doc="Files.", parameters=("path",)))

    assert registry.lookup("file") is descriptor
    assert "file" in registry
    assert registry.names() == ["file"]
    assert len(registry) == 1


@pytest.mark.os_agnostic
def test_default_parent_is_the_root_type(registry: TypeRegistry) -> None:
    """Every registration derives from the root unless told otherwise."""
    descriptor = registry.register("file")

    assert descriptor.parent is ROOT_TYPE
    assert descriptor.namevar == "name"
    assert descriptor.is_a(ROOT_TYPE)


@pytest.mark.os_agnostic
def test_child_inherits_and_extends_parent(registry: TypeRegistry) -> None:
    """Parameters and properties accumulate without duplicates."""
    registry.register("file", TypeDefinition(parameters=("path",), properties=("mode",), namevar="path"))

    link = registry.register("link", TypeDefinition(parameters=("path", "target")), parent="file")

    assert link.parameters == ("path", "target")
    assert link.properties == ("mode",)
    assert link.namevar == "path"
    assert [node.name for node in link.ancestry()] == ["link", "file", "type"]


@pytest.mark.os_agnostic
def test_parent_may_be_given_by_descriptor(registry: TypeRegistry) -> None:
    """A descriptor is accepted wherever a parent name is."""
    file_type = registry.register("file")

    link = registry.register("link", parent=file_type)

    assert link.is_a(file_type)


@pytest.mark.os_agnostic
def test_root_type_is_addressable_by_name(registry: TypeRegistry) -> None:
    """The root's name resolves even though it is never registered."""
    assert registry.register("exec", parent="type").parent is ROOT_TYPE


@pytest.mark.os_agnostic
def test_unknown_parent_is_rejected(registry: TypeRegistry) -> None:
    """A parent name never registered raises UnknownTypeError."""
    with pytest.raises(UnknownTypeError, match="Unknown type ghost"):
        registry.register("child", parent="ghost")

    assert "child" not in registry


@pytest.mark.os_agnostic
def test_reregistration_replaces_previous_descriptor(registry: TypeRegistry) -> None:
    """The latest registration wins."""
    first = registry.register("file")
    second = registry.register("file", TypeDefinition(doc="Second."))

    assert registry.lookup("file") is second
    assert second is not first


@pytest.mark.os_agnostic
def test_type_names_must_be_strings(registry: TypeRegistry) -> None:
    """Type names follow the parameter-name rules."""
    with pytest.raises(InvalidArgumentError):
        registry.register(7)
