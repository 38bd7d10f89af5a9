"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration loading, settings and display
    * :mod:`.logging` - lib_log_rich setup and the stdlib logging collaborator
    * :mod:`.system` - Real filesystem and POSIX identity collaborators
    * :mod:`.memory` - In-memory collaborators for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
