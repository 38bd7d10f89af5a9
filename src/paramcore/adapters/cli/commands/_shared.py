"""Shared helpers for CLI command modules.

Contents:
    * :func:`log_scope` - bind a lib_log_rich job context when logging is live.
    * :func:`fail_with` - report a domain error and exit with its code.
"""

from __future__ import annotations

import contextlib
from collections.abc import Mapping
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click

from paramcore.domain.errors import ParamcoreError

from ..exit_codes import exit_code_for


def log_scope(job_id: str, extra: Mapping[str, object]) -> contextlib.AbstractContextManager[object]:
    """Return a lib_log_rich binding, or a no-op when the runtime is not initialised.

    In-memory service wiring never initialises lib_log_rich.
    """
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra))
    return contextlib.nullcontext()


def fail_with(error: ParamcoreError) -> NoReturn:
    """Print ``error`` to stderr and exit with its mapped exit code.

    Raises:
        SystemExit: Always.
    """
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(exit_code_for(error)) from error


__all__ = ["fail_with", "log_scope"]
