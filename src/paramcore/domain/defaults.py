"""Default tree: built-in fallback values for every known parameter.

A default is one of three shapes, modelled as a closed union:

* :class:`Literal` - a plain value returned as-is;
* :class:`Computed` - a zero-argument callable evaluated on every read;
* :class:`Reference` - "join ``suffix`` onto the resolved value of ``base``".

The tree itself holds no resolution logic; the parameter store walks
references through its own accessor so overlaid bases are honoured.

Contents:
    * :func:`classify_default` - turn a raw registration value into a default.
    * :class:`DefaultTree` - name → default mapping with validated registration.
    * :func:`build_default_tree` - the built-in set, rooted by privilege.
"""

from __future__ import annotations

import os
import socket
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidDefaultError, UnknownBaseParameterError
from .names import normalize_name


@dataclass(frozen=True, slots=True)
class Literal:
    """A default returned verbatim."""

    value: object


@dataclass(frozen=True, slots=True)
class Computed:
    """A default produced by calling ``func`` on every read."""

    func: Callable[[], object]

    def __call__(self) -> object:
        return self.func()


@dataclass(frozen=True, slots=True)
class Reference:
    """A default expressed relative to another parameter's resolved value."""

    base: str
    suffix: str


DefaultValue = Literal | Computed | Reference
"""Union of the three default shapes."""


def _program_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "paramcore"


class DefaultTree:
    """Mutable mapping from parameter name to :data:`DefaultValue`.

    Entries are only ever inserted or replaced through :meth:`register`,
    never deleted.

    Example:
        >>> tree = DefaultTree({"confdir": Literal("/etc/app")})
        >>> tree.register("ssldir", ("confdir", "ssl"))
        Reference(base='confdir', suffix='ssl')
        >>> "ssldir" in tree
        True
    """

    def __init__(self, entries: dict[str, DefaultValue] | None = None) -> None:
        self._entries: dict[str, DefaultValue] = {}
        for name, value in (entries or {}).items():
            self._entries[normalize_name(name)] = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> DefaultValue | None:
        return self._entries.get(normalize_name(name))

    def register(self, name: object, value: object) -> DefaultValue:
        """Validate ``value`` and insert or replace the entry for ``name``.

        Validation completes before the tree is touched, so a rejected value
        leaves any previous entry in place.

        Raises:
            InvalidArgumentError: If ``name`` is not a string.
            InvalidDefaultError: If a reference is malformed.
            UnknownBaseParameterError: If a reference names an unknown base.
        """
        key = normalize_name(name)
        default = classify_default(key, value, known=self)
        self._entries[key] = default
        return default


def classify_default(name: str, value: object, *, known: DefaultTree) -> DefaultValue:
    """Turn a raw registration value into one of the default shapes.

    A ``tuple`` or ``list`` is a reference and must be exactly
    ``(base_name, suffix)`` with ``base_name`` already in ``known``. A callable
    becomes :class:`Computed`. Anything else is a :class:`Literal`.

    Example:
        >>> tree = DefaultTree({"vardir": Literal("/var/app")})
        >>> classify_default("logdir", ["vardir", "log"], known=tree)
        Reference(base='vardir', suffix='log')
        >>> classify_default("noop", False, known=tree)
        Literal(value=False)
        >>> classify_default("rundir", ("nosuch", "run"), known=tree)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UnknownBaseParameterError: Unknown basedir nosuch for param rundir
    """
    if isinstance(value, Literal | Computed):
        return value
    if isinstance(value, Reference):
        value = (value.base, value.suffix)
    if isinstance(value, tuple | list):
        if len(value) != 2:
            raise InvalidDefaultError(name, value)
        base, suffix = value
        if not isinstance(base, str):
            raise InvalidDefaultError(name, value)
        if base not in known:
            raise UnknownBaseParameterError(name, normalize_name(base))
        if not isinstance(suffix, str):
            raise InvalidDefaultError(name, value)
        return Reference(normalize_name(base), suffix)
    if callable(value):
        return Computed(value)
    return Literal(value)


def build_default_tree(*, privileged: bool, home: Path | None = None) -> DefaultTree:
    """Build the built-in default tree.

    The two root directories are chosen once from ``privileged``: system-wide
    locations for the privileged identity, a dot-directory under the user's
    home otherwise. Every other directory default hangs off those roots.

    Args:
        privileged: Whether the process runs as the privileged system identity.
        home: Home directory for unprivileged roots. Defaults to ``~``.

    Example:
        >>> tree = build_default_tree(privileged=True)
        >>> tree.get("confdir")
        Literal(value='/etc/paramcore')
        >>> tree.get("manifest")
        Reference(base='manifestdir', suffix='site.pp')
    """
    if privileged:
        confdir = "/etc/paramcore"
        vardir = "/var/paramcore"
    else:
        root = home if home is not None else Path(os.path.expanduser("~"))
        confdir = str(root / ".paramcore")
        vardir = str(root / ".paramcore" / "var")

    tree = DefaultTree(
        {
            "confdir": Literal(confdir),
            "vardir": Literal(vardir),
            "name": Computed(_program_name),
            "certname": Computed(socket.getfqdn),
        }
    )

    references: list[tuple[str, tuple[str, str]]] = [
        ("rrddir", ("vardir", "rrd")),
        ("logdir", ("vardir", "log")),
        ("bucketdir", ("vardir", "bucket")),
        ("statedir", ("vardir", "state")),
        ("rundir", ("vardir", "run")),
        # then the files
        ("manifestdir", ("confdir", "manifests")),
        ("manifest", ("manifestdir", "site.pp")),
        ("localconfig", ("confdir", "localconfig.yaml")),
        ("logfile", ("logdir", "paramcore.log")),
        ("httplogfile", ("logdir", "http.log")),
        ("masterlog", ("logdir", "master.log")),
        ("masterhttplog", ("logdir", "masterhttp.log")),
        ("checksumfile", ("statedir", "checksums")),
        ("ssldir", ("confdir", "ssl")),
    ]
    for name, reference in references:
        tree.register(name, reference)

    scalars: dict[str, object] = {
        "server": "paramcore",
        "user": "paramcore",
        "group": "paramcore",
        "rrdgraph": False,
        "noop": False,
        "parseonly": False,
        "port": 8139,
        "masterport": 8140,
    }
    for name, value in scalars.items():
        tree.register(name, Literal(value))

    return tree


__all__ = [
    "Computed",
    "DefaultTree",
    "DefaultValue",
    "Literal",
    "Reference",
    "build_default_tree",
    "classify_default",
]
