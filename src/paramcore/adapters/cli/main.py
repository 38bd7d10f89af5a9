"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - run the root group and turn every outcome into an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from paramcore import __init__conf__
from paramcore.domain.errors import ParamcoreError

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, preserved_traceback_state
from .exit_codes import exit_code_for

if TYPE_CHECKING:
    from paramcore.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]


def _report_unhandled(exc: BaseException) -> int:
    """Let lib_cli_exit_tools format ``exc`` and choose the exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: ServicesFactory) -> int:
    from .root import cli

    try:
        # ctx.obj must carry the services factory, which lib_cli_exit_tools.run_cli cannot pass.
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands exit with their own status after reporting the failure.
        if exc.code is None or isinstance(exc.code, int):
            return int(exc.code or 0)
        return _report_unhandled(exc)
    except ParamcoreError as exc:
        if lib_cli_exit_tools.config.traceback:
            return _report_unhandled(exc)
        click.echo(f"Error: {exc}", err=True)
        return int(exit_code_for(exc))
    except BaseException as exc:  # noqa: BLE001 - KeyboardInterrupt ends here too
        return _report_unhandled(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: ServicesFactory | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Domain errors that escape a command are reported as one line and mapped
    through :func:`exit_code_for`; anything else is formatted by
    lib_cli_exit_tools.

    Args:
        argv: CLI arguments; ``None`` reads ``sys.argv``.
        restore_traceback: Restore the traceback flags afterwards.
        services_factory: Returns the AppServices to wire. Callers outside the
            adapters layer pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from paramcore.composition import build_testing
        >>> main(["get", "masterport"], services_factory=build_testing)
        8140
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        with preserved_traceback_state(enabled=restore_traceback):
            return _invoke(args, services_factory)
    finally:
        # The runtime is process-wide; a worker thread must not tear it down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
