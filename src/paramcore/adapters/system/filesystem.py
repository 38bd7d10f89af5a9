"""Local filesystem adapter backed by :mod:`os` and :mod:`pathlib`."""

from __future__ import annotations

import os
from pathlib import Path


class LocalFilesystem:
    """Filesystem collaborator operating on the real filesystem.

    Example:
        >>> fs = LocalFilesystem()
        >>> fs.join("/var", "log")
        '/var/log'
    """

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def mkdir(self, path: str, mode: int) -> None:
        os.mkdir(path, mode)

    def join(self, *parts: str) -> str:
        return os.path.join(*parts)


__all__ = ["LocalFilesystem"]
