"""System adapters - real filesystem and OS identity collaborators.

Contents:
    * :mod:`.filesystem` - :class:`LocalFilesystem`
    * :mod:`.identity` - :class:`PosixIdentity` and :func:`is_privileged`
"""

from __future__ import annotations

from .filesystem import LocalFilesystem
from .identity import PosixIdentity, is_privileged

__all__ = ["LocalFilesystem", "PosixIdentity", "is_privileged"]
