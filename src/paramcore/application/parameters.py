"""Parameter store: explicit overlay on top of the default tree.

Reads consult, in order, the reserved-name side table, the overlay and the
default tree. Overlay entries are terminal; only defaults are resolved, and
references resolve their base through :meth:`ParameterStore.get` so an
overlaid base propagates to every dependant on the next read.

Contents:
    * :class:`ReservedParameter` - getter/setter pair for a reserved name.
    * :class:`ParameterStore` - the store itself.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ..domain.defaults import Computed, DefaultTree, DefaultValue, Literal
from ..domain.enums import LogLevel, ReservedName
from ..domain.errors import CyclicDefaultError, UnknownParameterError
from ..domain.names import normalize_name
from .ports import LoggingPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReservedParameter:
    """Side-effect routing for one reserved name.

    A ``getter`` of ``None`` means reads fall through to the ordinary lookup.
    """

    setter: Callable[[object], None]
    getter: Callable[[], object] | None = None


class ParameterStore:
    """Overlay of explicit assignments above a :class:`DefaultTree`.

    Every operation holds a single re-entrant lock; reference resolution
    re-enters :meth:`get` while holding it.

    Example:
        >>> from paramcore.adapters.memory import InMemoryLogging
        >>> from paramcore.domain.defaults import build_default_tree
        >>> store = ParameterStore(build_default_tree(privileged=True), InMemoryLogging())
        >>> store["ssldir"]
        '/etc/paramcore/ssl'
        >>> store["confdir"] = "/srv/app"
        >>> store["ssldir"]
        '/srv/app/ssl'
        >>> store.reset()
        >>> store["ssldir"]
        '/etc/paramcore/ssl'
    """

    def __init__(self, defaults: DefaultTree, logging_port: LoggingPort) -> None:
        self._defaults = defaults
        self._logging = logging_port
        self._overlay: dict[str, object] = {}
        self._lock = threading.RLock()
        self._reserved: dict[str, ReservedParameter] = {
            ReservedName.DEBUG.value: ReservedParameter(setter=self._set_debug, getter=self._get_debug),
            ReservedName.LOGLEVEL.value: ReservedParameter(
                setter=self._logging.set_level, getter=self._logging.current_level
            ),
            ReservedName.LOGDEST.value: ReservedParameter(setter=self._logging.add_destination),
        }

    @property
    def defaults(self) -> DefaultTree:
        return self._defaults

    # ------------------------------------------------------------------ reads

    def get(self, name: object) -> object:
        """Return the resolved value of ``name``.

        Raises:
            InvalidArgumentError: If ``name`` is not a string.
            UnknownParameterError: If ``name`` is neither overlaid nor defaulted.
            CyclicDefaultError: If reference defaults loop back on themselves.
        """
        key = normalize_name(name)
        with self._lock:
            return self._lookup(key, ())

    def __getitem__(self, name: object) -> object:
        return self.get(name)

    def _lookup(self, key: str, chain: tuple[str, ...]) -> object:
        reserved = self._reserved.get(key)
        if reserved is not None and reserved.getter is not None:
            return reserved.getter()
        if key in self._overlay:
            return self._overlay[key]
        default = self._defaults.get(key)
        if default is None:
            raise UnknownParameterError(key)
        return self._resolve(key, default, chain)

    def _resolve(self, key: str, default: DefaultValue, chain: tuple[str, ...]) -> object:
        if isinstance(default, Literal):
            return default.value
        if isinstance(default, Computed):
            return default()
        chain = (*chain, key)
        if default.base in chain:
            raise CyclicDefaultError((*chain, default.base))
        base_value = self._lookup(default.base, chain)
        return os.path.join(str(base_value), default.suffix)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = normalize_name(name)
        reserved = self._reserved.get(key)
        if reserved is not None and reserved.getter is not None:
            return True
        with self._lock:
            return key in self._overlay or key in self._defaults

    def is_reserved(self, name: object) -> bool:
        """Return whether ``name`` is routed to the logging collaborator."""
        return isinstance(name, str) and normalize_name(name) in self._reserved

    def is_overridden(self, name: object) -> bool:
        key = normalize_name(name)
        with self._lock:
            return key in self._overlay

    def names(self) -> list[str]:
        """Return every readable name, sorted.

        Covers defaults, overlay entries and reserved names that have a getter.
        """
        readable = {key for key, reserved in self._reserved.items() if reserved.getter is not None}
        with self._lock:
            return sorted(set(self._defaults) | set(self._overlay) | readable)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def snapshot(self) -> dict[str, object]:
        """Resolve every known parameter into a plain dict.

        Parameters whose resolution fails are skipped with a warning so one
        broken default does not hide the rest.
        """
        result: dict[str, object] = {}
        with self._lock:
            for key in self.names():
                try:
                    result[key] = self._lookup(key, ())
                except (UnknownParameterError, CyclicDefaultError) as exc:
                    logger.warning("Skipping unresolvable parameter %s: %s", key, exc)
        return result

    # ----------------------------------------------------------------- writes

    def set(self, name: object, value: object) -> None:
        """Assign ``value`` to ``name``.

        Reserved names are routed to the logging collaborator; every other
        name overwrites its overlay entry without any type checking.
        """
        key = normalize_name(name)
        with self._lock:
            reserved = self._reserved.get(key)
            if reserved is not None:
                reserved.setter(value)
                return
            self._overlay[key] = value

    def __setitem__(self, name: object, value: object) -> None:
        self.set(name, value)

    def reset(self) -> None:
        """Drop every overlay entry; defaults and reserved routing are untouched."""
        with self._lock:
            self._overlay.clear()

    def register_default(self, name: object, value: object) -> DefaultValue:
        """Insert or replace the default for ``name``.

        Raises:
            InvalidDefaultError: If a reference value is malformed.
            UnknownBaseParameterError: If a reference names an unknown base.
        """
        with self._lock:
            default = self._defaults.register(name, value)
        logger.debug("Registered default for %s: %r", normalize_name(name), default)
        return default

    # ------------------------------------------------------- reserved routing

    def _get_debug(self) -> bool:
        return self._logging.current_level() == self._logging.debug_level

    def _set_debug(self, value: object) -> None:
        level: LogLevel = self._logging.debug_level if value else self._logging.default_level
        self._logging.set_level(level)


__all__ = ["ParameterStore", "ReservedParameter"]
