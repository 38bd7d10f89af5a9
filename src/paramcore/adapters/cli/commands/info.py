"""Package metadata CLI command.

Contents:
    * :func:`cli_info` - Display package metadata and the privilege mode.
"""

from __future__ import annotations

import logging

import rich_click as click

from paramcore import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import log_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print resolved metadata so users can inspect installation details."""
    cli_ctx = get_cli_context(ctx)
    with log_scope("cli-info", {"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        mode = "privileged" if cli_ctx.context.privileged else "unprivileged"
        click.echo(f"\n    defaults      = {mode} ({cli_ctx.context.parameters.get('confdir')})")


__all__ = ["cli_info"]
