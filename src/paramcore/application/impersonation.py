"""Temporary assumption of another user's effective identity.

The effective uid is process-wide state, so every switch/run/restore
sequence runs under one module-level lock. The lock is re-entrant so a
unit of work may impersonate again on the same thread; restorations unwind
in reverse order.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from ..domain.errors import UnknownUserError
from .ports import IdentityPort

logger = logging.getLogger(__name__)

T = TypeVar("T")

_IDENTITY_LOCK = threading.RLock()


def resolve_uid(username: str, *, identity: IdentityPort) -> int:
    """Return the numeric uid for ``username``.

    Raises:
        UnknownUserError: If the identity layer does not know the user. The
            lookup error is chained as ``__cause__``.
    """
    try:
        return identity.lookup_uid(username)
    except LookupError as exc:
        raise UnknownUserError(username) from exc


@contextmanager
def impersonate(username: str, *, identity: IdentityPort) -> Iterator[int]:
    """Run the ``with`` body under ``username``'s effective uid.

    Yields the effective uid in force inside the block. The previous uid is
    restored on exit, including when the body raises.

    Example:
        >>> from paramcore.adapters.memory import FakeIdentity
        >>> ids = FakeIdentity(users={"root": 0, "alice": 1000}, euid=1000)
        >>> with impersonate("root", identity=ids) as uid:
        ...     uid, ids.effective_uid()
        (0, 0)
        >>> ids.effective_uid()
        1000
    """
    uid = resolve_uid(username, identity=identity)
    with _IDENTITY_LOCK:
        previous = identity.effective_uid()
        if previous == uid:
            yield uid
            return
        logger.debug("Switching effective uid %d -> %d (%s)", previous, uid, username)
        identity.set_effective_uid(uid)
        try:
            yield uid
        finally:
            identity.set_effective_uid(previous)
            logger.debug("Restored effective uid %d", previous)


def as_user(username: str, work: Callable[[], T], *, identity: IdentityPort) -> T:
    """Call ``work`` as ``username`` and return its result.

    Example:
        >>> from paramcore.adapters.memory import FakeIdentity
        >>> ids = FakeIdentity(users={"root": 0}, euid=1000)
        >>> as_user("root", ids.effective_uid, identity=ids)
        0
    """
    with impersonate(username, identity=identity):
        return work()


__all__ = ["as_user", "impersonate", "resolve_uid"]
