# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MagicMap node model.

A tree value is a MagicNode tagged with one of three kinds:

- MAPPING: ``value`` is a dict of label -> MagicNode
- SEQUENCE: ``value`` is a list of MagicNode
- SCALAR: ``value`` is the raw leaf (str, number, bool, None, ...)

Containers never hold raw children: ``wrap`` converts recursively and
eagerly, ``unwrap`` converts back to plain dicts and lists.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """The three variants of a tree value."""

    MAPPING = 'mapping'
    SEQUENCE = 'sequence'
    SCALAR = 'scalar'


class MagicNode:
    """A tagged tree value.

    Example:
        >>> node = wrap({'name': 'Alice', 'tags': ['a', 'b']})
        >>> node.kind
        <NodeKind.MAPPING: 'mapping'>
        >>> node.value['tags'].kind
        <NodeKind.SEQUENCE: 'sequence'>
        >>> unwrap(node)
        {'name': 'Alice', 'tags': ['a', 'b']}
    """

    __slots__ = ('kind', 'value')

    def __init__(self, kind: NodeKind, value: Any = None) -> None:
        """Initialize a MagicNode.

        Args:
            kind: The node variant.
            value: dict of children for MAPPING, list of children for
                SEQUENCE, the raw leaf for SCALAR. Containers default to empty.
        """
        if value is None and kind is NodeKind.MAPPING:
            value = {}
        elif value is None and kind is NodeKind.SEQUENCE:
            value = []
        self.kind = kind
        self.value = value

    @classmethod
    def mapping(cls) -> MagicNode:
        """Return a fresh empty MAPPING node."""
        return cls(NodeKind.MAPPING, {})

    def __repr__(self) -> str:
        if self.kind is NodeKind.MAPPING:
            return f"MagicNode(mapping, {list(self.value)})"
        if self.kind is NodeKind.SEQUENCE:
            return f"MagicNode(sequence, {len(self.value)})"
        return f"MagicNode(scalar, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagicNode):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __len__(self) -> int:
        """Number of direct children, 0 for scalars."""
        if self.kind is NodeKind.SCALAR:
            return 0
        return len(self.value)

    @property
    def is_container(self) -> bool:
        """True for MAPPING and SEQUENCE nodes."""
        return self.kind is not NodeKind.SCALAR

    def children(self) -> list[tuple[str, MagicNode]]:
        """Return (segment, child) pairs in traversal order.

        Mapping entries come in insertion order, sequence elements are
        labelled with their bare index. Scalars have no children.
        """
        if self.kind is NodeKind.MAPPING:
            return list(self.value.items())
        if self.kind is NodeKind.SEQUENCE:
            return [(str(i), child) for i, child in enumerate(self.value)]
        return []


def wrap(value: Any) -> MagicNode:
    """Convert a raw value into a MagicNode tree.

    Mappings become MAPPING nodes, lists and tuples become SEQUENCE nodes,
    anything else is carried unchanged in a SCALAR node. An existing
    MagicNode or MagicMap is deep-copied so the result never shares
    structure with it.

    Args:
        value: Any raw value.

    Returns:
        The wrapped node.
    """
    from .magicmap import MagicMap
    from .snapshot import deep_clone

    if isinstance(value, MagicNode):
        return deep_clone(value)
    if isinstance(value, MagicMap):
        return deep_clone(value.node)
    if isinstance(value, Mapping):
        return MagicNode(
            NodeKind.MAPPING, {str(k): wrap(v) for k, v in value.items()}
        )
    if isinstance(value, (list, tuple)):
        return MagicNode(NodeKind.SEQUENCE, [wrap(v) for v in value])
    return MagicNode(NodeKind.SCALAR, value)


def unwrap(node: MagicNode) -> Any:
    """Convert a MagicNode tree back into plain dicts, lists and scalars."""
    if node.kind is NodeKind.MAPPING:
        return {label: unwrap(child) for label, child in node.value.items()}
    if node.kind is NodeKind.SEQUENCE:
        return [unwrap(child) for child in node.value]
    return node.value
