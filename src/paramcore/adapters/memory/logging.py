"""In-memory logging adapters for testing.

Provides a no-op logging initializer and :class:`InMemoryLogging`, a
logging collaborator that records levels, destinations and emitted records
instead of touching the logging framework.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from lib_layered_config import Config

from ...domain.enums import LogLevel


def init_logging_in_memory(config: Config) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


def _empty_records() -> list[tuple[LogLevel, str]]:
    return []


def _empty_destinations() -> list[object]:
    return []


@dataclass
class InMemoryLogging:
    """Captures logging-collaborator calls for test assertions.

    Attributes:
        level: Current level; starts at ``notice``.
        destinations: Every sink passed to :meth:`add_destination`, in order.
        records: ``(level, message)`` pairs passed to :meth:`emit` that pass
            the current level.

    Example:
        >>> spy = InMemoryLogging()
        >>> spy.set_level("debug")
        >>> spy.current_level()
        <LogLevel.DEBUG: 'debug'>
        >>> spy.emit("info", "hello")
        >>> spy.records
        [(<LogLevel.INFO: 'info'>, 'hello')]
    """

    level: LogLevel = LogLevel.NOTICE
    destinations: list[object] = field(default_factory=_empty_destinations)
    records: list[tuple[LogLevel, str]] = field(default_factory=_empty_records)

    @property
    def debug_level(self) -> LogLevel:
        return LogLevel.DEBUG

    @property
    def default_level(self) -> LogLevel:
        return LogLevel.NOTICE

    def levels(self) -> Sequence[LogLevel]:
        return tuple(LogLevel)

    def current_level(self) -> LogLevel:
        return self.level

    def set_level(self, level: LogLevel | str) -> None:
        self.level = LogLevel.parse(level)

    def add_destination(self, sink: object) -> None:
        self.destinations.append(sink)

    def emit(self, level: LogLevel | str, message: str) -> None:
        parsed = LogLevel.parse(level)
        if parsed.numeric >= self.level.numeric:
            self.records.append((parsed, message))

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.level = LogLevel.NOTICE
        self.destinations.clear()
        self.records.clear()


__all__ = ["InMemoryLogging", "init_logging_in_memory"]
