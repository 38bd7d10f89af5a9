"""Recursive directory creation."""

from __future__ import annotations

import logging
from pathlib import PurePath

from ..domain.enums import DirectoryStatus
from ..domain.errors import PathConflictError
from .ports import FilesystemPort

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_MODE = 0o755


def ensure_directory(
    path: str | PurePath,
    mode: int = DEFAULT_DIRECTORY_MODE,
    *,
    filesystem: FilesystemPort,
) -> DirectoryStatus:
    """Create ``path`` and every missing parent with ``mode``.

    An existing path, file or directory, is left alone. Components created
    before a failure stay in place.

    Args:
        path: Directory to create.
        mode: Permission bits for every directory created.
        filesystem: Filesystem collaborator.

    Returns:
        ``DirectoryStatus.EXISTED`` when nothing was done,
        ``DirectoryStatus.CREATED`` otherwise.

    Raises:
        PathConflictError: If an intermediate component is not a directory.

    Example:
        >>> from paramcore.adapters.memory import InMemoryFilesystem
        >>> fs = InMemoryFilesystem()
        >>> ensure_directory("/tmp/x/y/z", filesystem=fs)
        <DirectoryStatus.CREATED: 'created'>
        >>> ensure_directory("/tmp/x/y/z", filesystem=fs)
        <DirectoryStatus.EXISTED: 'existed'>
    """
    target = str(path)
    if filesystem.exists(target):
        return DirectoryStatus.EXISTED

    current = ""
    for part in PurePath(target).parts:
        current = filesystem.join(current, part) if current else part
        if not filesystem.exists(current):
            logger.debug("Creating directory %s (mode %o)", current, mode)
            filesystem.mkdir(current, mode)
        elif not filesystem.is_dir(current):
            raise PathConflictError(target, current)
    return DirectoryStatus.CREATED


__all__ = ["DEFAULT_DIRECTORY_MODE", "ensure_directory"]
