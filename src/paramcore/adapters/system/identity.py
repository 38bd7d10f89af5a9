"""POSIX identity adapter backed by :mod:`pwd` and :func:`os.seteuid`.

Only available on POSIX hosts; importing :mod:`pwd` is deferred so the
module itself imports everywhere.
"""

from __future__ import annotations

import os


class PosixIdentity:
    """Identity collaborator using the password database and effective uid."""

    def lookup_uid(self, username: str) -> int:
        """Return the uid for ``username``; ``KeyError`` when unknown."""
        import pwd

        return pwd.getpwnam(username).pw_uid

    def effective_uid(self) -> int:
        return os.geteuid()

    def set_effective_uid(self, uid: int) -> None:
        os.seteuid(uid)


def is_privileged() -> bool:
    """Return whether the process runs as the privileged system identity.

    Always ``False`` on platforms without effective uids.
    """
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


__all__ = ["PosixIdentity", "is_privileged"]
