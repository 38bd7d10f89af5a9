"""In-memory filesystem and identity adapters for testing.

Contents:
    * :class:`InMemoryFilesystem` - dict-backed directory tree.
    * :class:`FakeIdentity` - user table plus a recorded effective uid.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field


def _root_only() -> dict[str, int | None]:
    return {"/": 0o755}


@dataclass
class InMemoryFilesystem:
    """Dict-backed filesystem understanding absolute POSIX paths.

    ``entries`` maps a normalised path to its mode for directories and to
    ``None`` for plain files.

    Example:
        >>> fs = InMemoryFilesystem()
        >>> fs.add_file("/etc/hosts")
        >>> fs.exists("/etc"), fs.is_dir("/etc"), fs.is_dir("/etc/hosts")
        (True, True, False)
    """

    entries: dict[str, int | None] = field(default_factory=_root_only)
    created: list[str] = field(default_factory=list)

    def exists(self, path: str) -> bool:
        return posixpath.normpath(path) in self.entries

    def is_dir(self, path: str) -> bool:
        return self.entries.get(posixpath.normpath(path), None) is not None

    def mkdir(self, path: str, mode: int) -> None:
        key = posixpath.normpath(path)
        if key in self.entries:
            raise FileExistsError(path)
        parent = posixpath.dirname(key)
        if parent != key and not self.is_dir(parent):
            raise FileNotFoundError(parent)
        self.entries[key] = mode
        self.created.append(key)

    def join(self, *parts: str) -> str:
        return posixpath.join(*parts)

    def add_dir(self, path: str, mode: int = 0o755) -> None:
        """Create ``path`` and all parents without recording them as created."""
        key = posixpath.normpath(path)
        parent = posixpath.dirname(key)
        if parent != key and parent not in self.entries:
            self.add_dir(parent, mode)
        self.entries[key] = mode

    def add_file(self, path: str) -> None:
        """Create a plain file at ``path`` along with its parent directories."""
        key = posixpath.normpath(path)
        self.add_dir(posixpath.dirname(key))
        self.entries[key] = None


def _no_users() -> dict[str, int]:
    return {}


def _no_switches() -> list[int]:
    return []


@dataclass
class FakeIdentity:
    """Identity collaborator with a fixed user table.

    Attributes:
        users: Username → uid table; unknown names raise ``KeyError``.
        euid: Current effective uid.
        switches: Every uid passed to :meth:`set_effective_uid`, in order.
    """

    users: dict[str, int] = field(default_factory=_no_users)
    euid: int = 1000
    switches: list[int] = field(default_factory=_no_switches)

    def lookup_uid(self, username: str) -> int:
        return self.users[username]

    def effective_uid(self) -> int:
        return self.euid

    def set_effective_uid(self, uid: int) -> None:
        self.switches.append(uid)
        self.euid = uid


__all__ = ["FakeIdentity", "InMemoryFilesystem"]
