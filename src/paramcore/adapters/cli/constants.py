"""Click settings shared by the root group and its subcommands."""

from __future__ import annotations

from typing import Any, Final

HELP_OPTION_NAMES: Final[list[str]] = ["-h", "--help"]

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": HELP_OPTION_NAMES}

#: ``run-as USER CMD...`` hands everything after USER to the child untouched,
#: options included.
PASSTHROUGH_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": HELP_OPTION_NAMES,
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}

#: lib_cli_exit_tools length budgets for short and ``--traceback`` error output.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "PASSTHROUGH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
