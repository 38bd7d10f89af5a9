"""Parse and apply ``--param NAME=VALUE`` CLI assignments to a ParameterStore."""

from __future__ import annotations

from dataclasses import dataclass

import orjson

from paramcore.application.parameters import ParameterStore

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ParameterAssignment:
    """A single parsed ``NAME=VALUE`` assignment."""

    name: str
    value: CoercedValue


def parse_assignment(raw: str) -> ParameterAssignment:
    """Split a ``NAME=VALUE`` string into a ParameterAssignment.

    The first ``=`` separates the name from the value; the value is coerced
    with :func:`coerce_value`.

    Raises:
        ValueError: If ``=`` is missing or the name is empty.

    Examples:
        >>> parse_assignment("server=config.example.com")
        ParameterAssignment(name='server', value='config.example.com')
        >>> parse_assignment("masterport=8141").value
        8141
        >>> parse_assignment("debug=true").value
        True
    """
    if "=" not in raw:
        raise ValueError(f"Invalid assignment {raw!r}: must contain '='")
    name, value_str = raw.split("=", maxsplit=1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid assignment {raw!r}: parameter name is empty")
    return ParameterAssignment(name=name, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw string value using JSON parsing with string fallback.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("8140")
        8140
        >>> coerce_value('["console", "/tmp/agent.log"]')
        ['console', '/tmp/agent.log']
        >>> coerce_value("/etc/paramcore")
        '/etc/paramcore'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def apply_assignments(store: ParameterStore, raw_assignments: tuple[str, ...]) -> list[ParameterAssignment]:
    """Parse every assignment, then apply them to ``store`` in order.

    All strings are parsed before the first one is applied, so a malformed
    assignment leaves the store untouched.

    Raises:
        ValueError: If any assignment string is malformed.
    """
    parsed = [parse_assignment(raw) for raw in raw_assignments]
    for assignment in parsed:
        store.set(assignment.name, assignment.value)
    return parsed


__all__ = [
    "CoercedValue",
    "ParameterAssignment",
    "apply_assignments",
    "coerce_value",
    "parse_assignment",
]
