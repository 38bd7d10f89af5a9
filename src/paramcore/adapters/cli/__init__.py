"""CLI package providing the command-line interface.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import cli_get, cli_info, cli_mkdir, cli_params, cli_run_as
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    preserved_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode, exit_code_for
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Exit codes
    "ExitCode",
    "exit_code_for",
    # Traceback management
    "apply_traceback_preferences",
    "preserved_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_get",
    "cli_info",
    "cli_mkdir",
    "cli_params",
    "cli_run_as",
]
