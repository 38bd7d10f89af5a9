"""Static package metadata surfaced to CLI commands and documentation.

Kept as plain constants so the CLI, the configuration loader and the logging
setup can import them without touching installed distribution metadata.

Contents:
    * Identity constants (:data:`name`, :data:`title`, :data:`version`, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config.
    * :func:`print_info` - human-readable metadata dump used by ``info``.
"""

from __future__ import annotations

name = "paramcore"
title = "Layered parameter store with chained defaults, impersonation and a type registry"
version = "0.10.2"
homepage = "https://github.com/paramcore/paramcore"
author = "paramcore maintainers"
author_email = "maintainers@paramcore.invalid"
shell_command = "paramcore"

#: Vendor/app/slug identifiers that decide platform-specific config paths.
LAYEREDCONF_VENDOR = "paramcore"
LAYEREDCONF_APP = "paramcore"
LAYEREDCONF_SLUG = "paramcore"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for paramcore:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
