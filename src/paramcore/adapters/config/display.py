"""Display resolved parameters as a Rich table or JSON.

Flushes pending lib_log_rich output first so log lines do not interleave
with the rendered parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

import lib_log_rich.runtime
import orjson
from rich.console import Console
from rich.table import Table

from paramcore.application.parameters import ParameterStore
from paramcore.domain.enums import OutputFormat


def _render_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _source_of(store: ParameterStore, name: str) -> str:
    if store.is_reserved(name):
        return "reserved"
    return "override" if store.is_overridden(name) else "default"


def render_json(values: Mapping[str, object]) -> str:
    """Serialise resolved parameters to indented JSON.

    Values orjson cannot encode natively fall back to ``str()``.

    Example:
        >>> print(render_json({"noop": False, "port": 8139}))
        {
          "noop": false,
          "port": 8139
        }
    """
    return orjson.dumps(dict(values), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS, default=str).decode()


def display_parameters(
    store: ParameterStore,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    names: tuple[str, ...] = (),
    console: Console | None = None,
) -> None:
    """Print resolved parameters.

    Args:
        store: Store to read from.
        output_format: Rich table for humans, or JSON.
        names: Restrict output to these parameters; all known ones when empty.
        console: Optional Rich Console, mainly for tests.

    Raises:
        UnknownParameterError: If a requested name is unknown.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    values = {name: store.get(name) for name in names} if names else store.snapshot()
    out = console or Console()

    if output_format is OutputFormat.JSON:
        out.print(render_json(values), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("parameter")
    table.add_column("value")
    table.add_column("source")
    for name, value in values.items():
        table.add_row(name, _render_value(value), _source_of(store, name))
    out.print(table)


__all__ = ["display_parameters", "render_json"]
