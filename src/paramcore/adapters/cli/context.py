"""Per-invocation CLI state and the shared traceback flags.

Contents:
    * :class:`CLIContext` - what the root group hands to every subcommand.
    * :func:`store_cli_context` / :func:`get_cli_context` - typed ``ctx.obj`` access.
    * :func:`apply_traceback_preferences` - set lib_cli_exit_tools' traceback flags.
    * :func:`preserved_traceback_state` - restore those flags after a run.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from paramcore.application.context import ConfigurationContext

if TYPE_CHECKING:
    from paramcore.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """State built once by the root group.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Layered configuration the context was built from.
        services: Wired ports.
        context: Parameter store, type registry and collaborators.
        profile: Configuration profile, if any.
    """

    traceback: bool
    config: Config
    services: AppServices
    context: ConfigurationContext
    profile: str | None = None


def store_cli_context(ctx: click.Context, cli_ctx: CLIContext) -> None:
    """Replace ``ctx.obj`` (the services factory) with ``cli_ctx``."""
    ctx.obj = cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the root group has not run.
    """
    obj = ctx.find_object(CLIContext)
    if obj is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


@contextmanager
def preserved_traceback_state(*, enabled: bool = True) -> Iterator[None]:
    """Put the traceback flags back as they were when the block exits.

    Example:
        >>> apply_traceback_preferences(False)
        >>> with preserved_traceback_state():
        ...     apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    config = lib_cli_exit_tools.config
    saved = (bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False)))
    try:
        yield
    finally:
        if enabled:
            config.traceback, config.traceback_force_color = saved


__all__ = [
    "CLIContext",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "store_cli_context",
]
