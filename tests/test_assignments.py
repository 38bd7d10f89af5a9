"""--param NAME=VALUE parsing, coercion and application."""

from __future__ import annotations

import pytest

from paramcore.adapters.config.assignments import (
    ParameterAssignment,
    apply_assignments,
    coerce_value,
    parse_assignment,
)
from paramcore.adapters.memory import InMemoryLogging
from paramcore.application.parameters import ParameterStore
from paramcore.domain.enums import LogLevel

# ======================== parse_assignment ========================


@pytest.mark.os_agnostic
def test_first_equals_sign_splits_name_from_value() -> None:
    """Later '=' characters belong to the value."""
    assert parse_assignment("server=a=b") == ParameterAssignment(name="server", value="a=b")


@pytest.mark.os_agnostic
def test_surrounding_whitespace_is_stripped_from_name() -> None:
    """' server =x' addresses 'server'."""
    assert parse_assignment(" server =x").name == "server"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["server", "=value", "  =value"])
def test_malformed_assignments_raise_value_error(raw: str) -> None:
    """Missing '=' or an empty name is rejected."""
    with pytest.raises(ValueError, match="Invalid assignment"):
        parse_assignment(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("8141", 8141),
        ("1.5", 1.5),
        ("null", None),
        ('{"a": 1}', {"a": 1}),
        ("/var/lib/agent", "/var/lib/agent"),
        ("not json", "not json"),
        ("", ""),
    ],
)
def test_values_are_parsed_as_json_with_string_fallback(raw: str, expected: object) -> None:
    """JSON literals become Python values; anything else stays a string."""
    assert coerce_value(raw) == expected


# ======================== apply_assignments ========================


@pytest.mark.os_agnostic
def test_assignments_are_applied_in_order(store: ParameterStore) -> None:
    """Later assignments to the same name win."""
    applied = apply_assignments(store, ("server=first", "server=second", "masterport=9000"))

    assert store.get("server") == "second"
    assert store.get("masterport") == 9000
    assert [item.name for item in applied] == ["server", "server", "masterport"]


@pytest.mark.os_agnostic
def test_malformed_assignment_leaves_store_untouched(store: ParameterStore) -> None:
    """Parsing completes before the first write."""
    with pytest.raises(ValueError):
        apply_assignments(store, ("server=ok", "broken"))

    assert store.get("server") == "paramcore"


@pytest.mark.os_agnostic
def test_reserved_assignments_reach_logging(store: ParameterStore, logging_spy: InMemoryLogging) -> None:
    """--param debug=true behaves like setting debug on the store."""
    apply_assignments(store, ("debug=true",))

    assert logging_spy.level is LogLevel.DEBUG
