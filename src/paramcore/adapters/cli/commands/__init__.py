"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Parameter commands from :mod:`.params`
    * Filesystem/identity commands from :mod:`.system`
"""

from __future__ import annotations

from .info import cli_info
from .params import cli_get, cli_params
from .system import cli_mkdir, cli_run_as

__all__ = [
    "cli_get",
    "cli_info",
    "cli_mkdir",
    "cli_params",
    "cli_run_as",
]
