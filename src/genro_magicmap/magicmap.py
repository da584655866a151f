# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MagicMap - path-addressable view over JSON-like data.

This module provides the MagicMap class, a facade over a single MagicNode
tree built from dicts, lists and scalars (or from JSON text).

Key Features:
    - **Path navigation**: Dotted paths ('user.profile.name'), numeric
      segments index into sequences ('user.hobbies.0')
    - **Safe defaults**: ``get`` returns a fallback, ``mm[path]`` raises
      PathNotFoundError with the failing segment
    - **Autovivification**: ``set`` creates intermediate mappings
    - **Glob queries**: '*', partial wildcards and '**' over every path
    - **Copy-on-write**: ``set_immutable`` returns a new MagicMap and
      leaves the receiver untouched
    - **Attribute access**: ``mm.user.profile.name``

Read-path results are views: a mapping or sequence comes back as a
MagicMap sharing the same subtree, a scalar comes back raw. Writing through
a view changes the tree it was taken from.

Example:
    Basic usage::

        mm = MagicMap({'user': {'profile': {'name': 'Alice', 'age': 30}}})
        mm['user.profile.name']              # 'Alice'
        mm.get('user.contact.email', 'N/A')  # 'N/A'
        mm.set('user.profile.age', 31)
        mm.user.profile.age                  # 31

        snapshot = mm.set_immutable('user.profile.name', 'Bob')
        snapshot['user.profile.name']        # 'Bob'
        mm['user.profile.name']              # 'Alice'

        mm.get_with_glob('user.*.name')      # ['Alice']
"""

from __future__ import annotations

from typing import Any, Iterator

from .matcher import find_glob, iter_paths
from .node import MagicNode, NodeKind, unwrap, wrap
from .paths import assign, exists, join_path, resolve
from .serialization import LeafTransform, dumps, loads
from .snapshot import assign_immutable, deep_clone


class MagicMap:
    """A facade holding exactly one root MagicNode.

    MagicMap provides:
    - get(path, default) / mm[path]: Tolerant and strict reads
    - set(path, value) / mm[path] = value: Writes with autovivification
    - get_with_glob(pattern): Multi-match queries
    - set_immutable(path, value): Copy-on-write update
    - raw() / to_json(): Plain data out

    Attribute names that are not methods of MagicMap are looked up as
    single-segment keys; use ``mm['keys']`` for keys that collide with
    a method name.

    On a sequence root iteration yields element values, while ``in``
    tests paths like every other read: ``0 in hobbies`` is True,
    ``'reading' in hobbies`` is False. Use ``'reading' in hobbies.values()``
    to test membership by value.
    """

    __slots__ = ('_node',)

    def __init__(self, data: Any = None) -> None:
        """Initialize a MagicMap.

        Args:
            data: Initial data. Can be:
                - None: an empty mapping
                - dict (or any Mapping): wrapped recursively
                - list or tuple: a sequence root (read and glob only)
                - MagicMap or MagicNode: deep-copied
                - anything else: a scalar root
        """
        object.__setattr__(self, '_node', MagicNode.mapping() if data is None else wrap(data))

    @classmethod
    def _view(cls, node: MagicNode) -> MagicMap:
        """Wrap an existing node without copying it."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, '_node', node)
        return instance

    @classmethod
    def from_json(cls, text: str | bytes) -> MagicMap:
        """Build a MagicMap from JSON text.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.
        """
        return cls(loads(text))

    @staticmethod
    def _present(node: MagicNode) -> Any:
        """Return what a read hands to callers: a view or a raw scalar."""
        if node.is_container:
            return MagicMap._view(node)
        return node.value

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"MagicMap({self.raw()!r})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._node)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over keys of a mapping root, or values of a sequence root."""
        if self._node.kind is NodeKind.SEQUENCE:
            return (self._present(child) for child in self._node.value)
        return iter(self.keys())

    def __contains__(self, path: str | int) -> bool:
        """Check if a dotted path (or int index) can be resolved.

        Tests paths, not values, also on a sequence root.
        """
        return exists(self._node, path)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MagicMap):
            return self._node == other._node
        return self.raw() == other

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, path: str | int) -> Any:
        """Get value by path, raising if it cannot be reached.

        Args:
            path: Dotted path, or an int index for a sequence root.

        Raises:
            PathNotFoundError: If a segment is missing.

        Example:
            >>> mm['user.hobbies.0']
            'reading'
        """
        return self._present(resolve(self._node, path))

    def __setitem__(self, path: str, value: Any) -> None:
        """Set value by path (see ``set``)."""
        self.set(path, value)

    def __getattr__(self, name: str) -> Any:
        """Read a single-segment key as an attribute, None if missing."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        """Write a single-segment key as an attribute."""
        if name.startswith('_'):
            object.__setattr__(self, name, value)
            return
        self.set(name, value)

    def __copy__(self) -> MagicMap:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> MagicMap:
        return self.copy()

    # ==================== Core API ====================

    @property
    def node(self) -> MagicNode:
        """The root MagicNode."""
        return self._node

    @property
    def kind(self) -> NodeKind:
        """Kind of the root node."""
        return self._node.kind

    def get(self, path: str | int, default: Any = None) -> Any:
        """Get the value at the given path, or ``default``.

        Args:
            path: Dotted path, or an int index for a sequence root.
            default: Returned as-is at the first segment that cannot be
                resolved.

        Returns:
            A MagicMap view for mappings and sequences, the raw value for
            scalars, or ``default``.
        """
        try:
            node = resolve(self._node, path)
        except KeyError:
            return default
        return self._present(node)

    def get_node(self, path: str | int) -> MagicNode:
        """Get the node at the given path.

        Raises:
            PathNotFoundError: If a segment is missing.
        """
        return resolve(self._node, path)

    def set(self, path: str, value: Any) -> None:
        """Set a value at the given path, creating intermediate mappings.

        Non-mapping values found on the way are replaced by mappings.
        Numeric segments are mapping keys here, ``set`` never creates or
        indexes into sequences.

        Raises:
            InvalidRootError: If the root is not a mapping.
            PathNotFoundError: If ``path`` is empty.

        Example:
            >>> mm.set('config.database.port', 5432)
        """
        assign(self._node, path, value)

    def get_with_glob(self, pattern: str) -> list[Any]:
        """Get every value whose path matches ``pattern``.

        Args:
            pattern: Dotted glob, e.g. 'user.*.name' or '**.id'.

        Returns:
            Values in depth-first traversal order, not deduplicated.

        Raises:
            ValueError: If the pattern is empty or has an empty segment.
        """
        return [self._present(node) for node in find_glob(self._node, pattern)]

    def set_immutable(self, path: str, value: Any) -> MagicMap:
        """Return a deep copy with ``value`` set at ``path``.

        The receiver is never modified.

        Raises:
            InvalidRootError: If the root is not a mapping.
            PathNotFoundError: If ``path`` is empty.
        """
        return MagicMap._view(assign_immutable(self._node, path, value))

    def copy(self) -> MagicMap:
        """Return an independent deep copy."""
        return MagicMap._view(deep_clone(self._node))

    # ==================== Iteration ====================

    def keys(self) -> list[str]:
        """Return mapping keys in insertion order (indices for a sequence)."""
        return [segment for segment, _ in self._node.children()]

    def values(self) -> list[Any]:
        """Return direct child values in order."""
        return [self._present(child) for _, child in self._node.children()]

    def items(self) -> list[tuple[str, Any]]:
        """Return (key, value) pairs in order."""
        return [(segment, self._present(child)) for segment, child in self._node.children()]

    def walk(self) -> Iterator[tuple[str, Any]]:
        """Yield (path, value) for every descendant, depth-first.

        Example:
            >>> for path, value in mm.walk():
            ...     print(path, value)
        """
        for segments, node in iter_paths(self._node):
            yield join_path(segments), self._present(node)

    # ==================== Conversion ====================

    def raw(self) -> Any:
        """Return the data as plain dicts, lists and scalars."""
        return unwrap(self._node)

    def to_json(
        self,
        indent: int | None = None,
        transform: LeafTransform | None = None,
        sort_keys: bool = False,
    ) -> str:
        """Serialize to JSON text.

        Args:
            indent: Indentation width, None for compact output.
            transform: Optional callable applied to every leaf value before
                encoding.
            sort_keys: Sort mapping keys in the output.
        """
        return dumps(self.raw(), indent=indent, transform=transform, sort_keys=sort_keys)
