"""Root CLI command group and global option handling.

Defines the top-level Click command group. Loads layered configuration,
initializes logging, builds the configuration context and applies
``--param`` assignments before any subcommand runs.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from pydantic import ValidationError

from paramcore import __init__conf__
from paramcore.adapters.config.assignments import apply_assignments
from paramcore.application.parameters import ParameterStore
from paramcore.domain.enums import ReservedName
from paramcore.domain.errors import ParamcoreError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from paramcore.composition import AppServices


def _apply_cli_assignments(store: ParameterStore, assignments: tuple[str, ...]) -> None:
    """Apply ``--param`` assignments, raising UsageError on malformed input."""
    try:
        apply_assignments(store, assignments)
    except (ValueError, ParamcoreError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--param",
    "assignments",
    multiple=True,
    default=(),
    metavar="NAME=VALUE",
    help="Assign a parameter (repeatable). Values are parsed as JSON when possible.",
)
@click.option("--debug", is_flag=True, default=False, help="Switch logging to the debug level")
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    profile: str | None,
    assignments: tuple[str, ...],
    debug: bool,
) -> None:
    """Root command building the configuration context for every subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from paramcore.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["get", "server"], obj=build_testing)
        >>> result.output
        'paramcore\\n'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    services.init_logging(config)
    try:
        context = services.build_context(config)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid [paramcore] configuration:\n{exc}") from exc
    _apply_cli_assignments(context.parameters, assignments)
    if debug:
        context.parameters.set(ReservedName.DEBUG, True)
    store_cli_context(
        ctx,
        CLIContext(traceback=traceback, config=config, services=services, context=context, profile=profile),
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from package ancestors that import
# this module.
def _register_commands() -> None:
    from .commands import cli_get, cli_info, cli_mkdir, cli_params, cli_run_as

    for cmd in (cli_info, cli_get, cli_params, cli_mkdir, cli_run_as):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
