"""Named registry of extensible type descriptors.

Types are plain frozen descriptors rather than synthesised classes: a child
copies its parent's parameters, properties and namevar, then extends them
with a :class:`TypeDefinition`.

Contents:
    * :class:`TypeDefinition` - customisation applied at registration.
    * :class:`TypeDescriptor` - immutable registered type.
    * :data:`ROOT_TYPE` - implicit parent of every registration.
    * :class:`TypeRegistry` - name → descriptor mapping.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import UnknownTypeError
from .names import normalize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TypeDefinition:
    """Fields a registration may add on top of its parent."""

    doc: str = ""
    parameters: tuple[str, ...] = ()
    properties: tuple[str, ...] = ()
    namevar: str | None = None


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """A registered type.

    Example:
        >>> child = TypeDescriptor(name="file", parent=ROOT_TYPE)
        >>> [t.name for t in child.ancestry()]
        ['file', 'type']
        >>> child.is_a(ROOT_TYPE)
        True
    """

    name: str
    parent: TypeDescriptor | None = None
    doc: str = ""
    parameters: tuple[str, ...] = ()
    properties: tuple[str, ...] = ()
    namevar: str | None = None

    def ancestry(self) -> tuple[TypeDescriptor, ...]:
        """Return this descriptor followed by each parent up to the root."""
        chain: list[TypeDescriptor] = []
        node: TypeDescriptor | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        return tuple(chain)

    def is_a(self, other: TypeDescriptor) -> bool:
        return any(node is other for node in self.ancestry())


ROOT_TYPE = TypeDescriptor(name="type", doc="Root of every registered type.", namevar="name")


def _extend(inherited: tuple[str, ...], added: tuple[str, ...]) -> tuple[str, ...]:
    return inherited + tuple(item for item in added if item not in inherited)


class TypeRegistry:
    """Process-lifetime mapping from type name to :class:`TypeDescriptor`.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.lookup("file") is None
        True
        >>> file_type = registry.register("file", TypeDefinition(parameters=("path",)))
        >>> registry.lookup("file") is file_type
        True
        >>> registry.register("link", parent="file").parameters
        ('path',)
    """

    def __init__(self, root: TypeDescriptor = ROOT_TYPE) -> None:
        self._root = root
        self._types: dict[str, TypeDescriptor] = {}
        self._lock = threading.RLock()

    @property
    def root(self) -> TypeDescriptor:
        return self._root

    def register(
        self,
        name: object,
        definition: TypeDefinition | None = None,
        *,
        parent: TypeDescriptor | str | None = None,
    ) -> TypeDescriptor:
        """Derive a new descriptor from ``parent`` and store it under ``name``.

        A previous registration under the same name is replaced.

        Args:
            name: Type name; normalised like parameter names.
            definition: Customisation applied on top of the parent.
            parent: Parent descriptor or registered name. Defaults to the root.

        Returns:
            The newly registered descriptor.

        Raises:
            InvalidArgumentError: If ``name`` is not a string.
            UnknownTypeError: If ``parent`` names an unregistered type.
        """
        key = normalize_name(name)
        definition = definition or TypeDefinition()
        with self._lock:
            base = self._resolve_parent(parent)
            descriptor = TypeDescriptor(
                name=key,
                parent=base,
                doc=definition.doc or base.doc,
                parameters=_extend(base.parameters, definition.parameters),
                properties=_extend(base.properties, definition.properties),
                namevar=definition.namevar or base.namevar,
            )
            if key in self._types:
                logger.debug("Replacing registered type %s", key)
            self._types[key] = descriptor
        return descriptor

    def lookup(self, name: object) -> TypeDescriptor | None:
        """Return the descriptor registered under ``name``, or ``None``."""
        key = normalize_name(name)
        with self._lock:
            if not self._types:
                logger.debug("Type lookup for %s before any type was registered", key)
                return None
            descriptor = self._types.get(key)
        if descriptor is None:
            logger.debug("No type registered under %s", key)
        return descriptor

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[TypeDescriptor]:
        with self._lock:
            return iter(list(self._types.values()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)

    def _resolve_parent(self, parent: TypeDescriptor | str | None) -> TypeDescriptor:
        if parent is None:
            return self._root
        if isinstance(parent, TypeDescriptor):
            return parent
        key = normalize_name(parent)
        if key == self._root.name:
            return self._root
        found = self._types.get(key)
        if found is None:
            raise UnknownTypeError(key)
        return found


__all__ = [
    "ROOT_TYPE",
    "TypeDefinition",
    "TypeDescriptor",
    "TypeRegistry",
]
