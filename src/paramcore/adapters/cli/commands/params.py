"""Parameter inspection CLI commands.

Contents:
    * :func:`cli_get` - Print the resolved value of one or more parameters.
    * :func:`cli_params` - Display every resolved parameter.
"""

from __future__ import annotations

import logging
from enum import Enum

import rich_click as click

from paramcore.domain.enums import OutputFormat
from paramcore.domain.errors import ParamcoreError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import fail_with, log_scope

logger = logging.getLogger(__name__)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def cli_get(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print the resolved value of each NAME.

    A single name prints the bare value; several print ``name = value`` lines.
    """
    cli_ctx = get_cli_context(ctx)
    store = cli_ctx.context.parameters
    with log_scope("cli-get", {"command": "get", "names": list(names)}):
        try:
            values = [(name, store.get(name)) for name in names]
        except ParamcoreError as exc:
            fail_with(exc)
        if len(values) == 1:
            click.echo(_format_value(values[0][1]))
            return
        for name, value in values:
            click.echo(f"{name} = {_format_value(value)}")


@click.command("params", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable table or JSON)",
)
@click.argument("names", nargs=-1)
@click.pass_context
def cli_params(ctx: click.Context, output_format: str, names: tuple[str, ...]) -> None:
    """Display resolved parameters with their source (default or set).

    Shows every known parameter unless NAMES are given.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with log_scope("cli-params", {"command": "params", "format": fmt.value}):
        logger.info("Displaying parameters", extra={"format": fmt.value, "names": list(names)})
        try:
            cli_ctx.services.display_parameters(cli_ctx.context.parameters, output_format=fmt, names=names)
        except ParamcoreError as exc:
            fail_with(exc)


__all__ = ["cli_get", "cli_params"]
