"""Filesystem and identity CLI commands.

Contents:
    * :func:`cli_mkdir` - Create a directory (or a directory parameter) recursively.
    * :func:`cli_run_as` - Run a command under another user's effective uid.
"""

from __future__ import annotations

import logging
import subprocess

import rich_click as click

from paramcore.domain.errors import ParamcoreError

from ..constants import CLICK_CONTEXT_SETTINGS, PASSTHROUGH_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail_with, log_scope

logger = logging.getLogger(__name__)


def _parse_octal_mode(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    """Click callback turning ``750`` or ``0o750`` into an int."""
    if value is None:
        return None
    try:
        return int(value, 0) if value.startswith("0o") else int(value, 8)
    except ValueError as exc:
        raise click.BadParameter(f"'{value}' is not an octal mode") from exc


@click.command("mkdir", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--mode",
    type=str,
    default=None,
    callback=_parse_octal_mode,
    help="Octal mode for created directories (default: [paramcore] directory_mode)",
)
@click.pass_context
def cli_mkdir(ctx: click.Context, targets: tuple[str, ...], mode: int | None) -> None:
    """Create each TARGET and its missing parents.

    A TARGET naming a known parameter (e.g. ``logdir``) is resolved first.
    """
    cli_ctx = get_cli_context(ctx)
    context = cli_ctx.context
    effective_mode = mode if mode is not None else context.directory_mode
    with log_scope("cli-mkdir", {"command": "mkdir", "mode": oct(effective_mode)}):
        for target in targets:
            try:
                status = context.ensure_directory(target, effective_mode)
            except ParamcoreError as exc:
                fail_with(exc)
            logger.info("Ensured directory", extra={"target": target, "status": status.value})
            click.echo(f"{target}: {status.value}")


@click.command("run-as", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@click.argument("user")
@click.argument("command", nargs=-1, type=click.UNPROCESSED, required=True)
@click.pass_context
def cli_run_as(ctx: click.Context, user: str, command: tuple[str, ...]) -> None:
    """Run COMMAND with USER's effective uid; the previous uid is restored afterwards."""
    cli_ctx = get_cli_context(ctx)
    with log_scope("cli-run-as", {"command": "run-as", "user": user}):
        logger.info("Running command as another user", extra={"user": user, "argv": list(command)})
        try:
            returncode = cli_ctx.context.as_user(
                lambda: subprocess.run(list(command), check=False).returncode,  # noqa: S603
                username=user,
            )
        except ParamcoreError as exc:
            fail_with(exc)
        except PermissionError as exc:
            click.echo(f"Error: cannot switch to user {user}: {exc}", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
    if returncode:
        raise SystemExit(returncode)


__all__ = ["cli_mkdir", "cli_run_as"]
