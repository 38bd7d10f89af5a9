"""Domain enum tests: member values, string equality and level mapping."""

from __future__ import annotations

import pytest

from paramcore.domain.enums import DirectoryStatus, LogLevel, OutputFormat, ReservedName
from paramcore.domain.errors import InvalidArgumentError

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_str"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_string_equality(member: OutputFormat, expected_str: str) -> None:
    """OutputFormat members must compare equal to their plain string equivalents."""
    assert member == expected_str


# ======================== LogLevel ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "numeric"),
    [
        (LogLevel.DEBUG, 10),
        (LogLevel.INFO, 20),
        (LogLevel.NOTICE, 25),
        (LogLevel.WARNING, 30),
        (LogLevel.ERR, 40),
        (LogLevel.ALERT, 45),
        (LogLevel.CRIT, 50),
        (LogLevel.EMERG, 60),
    ],
)
def test_log_level_numeric_mapping(member: LogLevel, numeric: int) -> None:
    """Each level maps onto a stdlib-compatible numeric level."""
    assert member.numeric == numeric


@pytest.mark.os_agnostic
def test_log_level_declaration_order_and_severity_order() -> None:
    """Declaration keeps the historical order; emerg is the most severe."""
    assert [member.value for member in LogLevel][-4:] == ["err", "alert", "emerg", "crit"]

    by_severity = sorted(LogLevel, key=lambda member: member.numeric)

    assert [member.value for member in by_severity][-4:] == ["err", "alert", "crit", "emerg"]


@pytest.mark.os_agnostic
def test_log_level_member_count() -> None:
    """LogLevel must have exactly 8 members."""
    assert len(LogLevel) == 8


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["notice", "NOTICE", "Notice", LogLevel.NOTICE])
def test_log_level_parse_is_case_insensitive(raw: str) -> None:
    """Strings in any case and members themselves parse to the member."""
    assert LogLevel.parse(raw) is LogLevel.NOTICE


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["chatty", "", 25, None])
def test_log_level_parse_rejects_unknown_values(raw: object) -> None:
    """Anything that names no level raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="Invalid loglevel"):
        LogLevel.parse(raw)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("numeric", "expected"),
    [
        (0, LogLevel.DEBUG),
        (10, LogLevel.DEBUG),
        (25, LogLevel.NOTICE),
        (29, LogLevel.NOTICE),
        (50, LogLevel.CRIT),
        (99, LogLevel.EMERG),
    ],
)
def test_log_level_from_numeric_picks_closest_lower(numeric: int, expected: LogLevel) -> None:
    """Numeric levels round down to the nearest named level."""
    assert LogLevel.from_numeric(numeric) is expected


# ======================== ReservedName / DirectoryStatus ========================


@pytest.mark.os_agnostic
def test_reserved_names() -> None:
    """Exactly three parameter names are routed to logging."""
    assert {member.value for member in ReservedName} == {"debug", "loglevel", "logdest"}


@pytest.mark.os_agnostic
def test_directory_status_string_equality() -> None:
    """DirectoryStatus members compare equal to the words printed by the CLI."""
    assert DirectoryStatus.CREATED == "created"
    assert DirectoryStatus.EXISTED == "existed"
