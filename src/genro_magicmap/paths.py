# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path resolution over MagicNode trees.

Path Syntax:
    - Dotted paths: 'user.profile.name'
    - Sequence index: 'user.hobbies.0' (decimal, 0-based, non-negative)
    - Empty path: the node itself

Whether a segment is a key or an index depends on the node it is applied
to, not on its spelling. Against a mapping, '0' is an ordinary key.

Reads and writes are asymmetric on purpose: ``resolve`` indexes into
existing sequences, while ``assign`` only autovivifies mappings. A
non-mapping value met on the way (scalar or sequence) is replaced by an
empty mapping, so ``assign`` always succeeds on a mapping root.
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import InvalidRootError, PathNotFoundError
from .node import MagicNode, NodeKind, wrap

logger = logging.getLogger(__name__)

SEPARATOR = '.'


def split_path(path: str | int) -> list[str]:
    """Split a dotted path into segments. The empty path has no segments.

    An int is taken as a single segment, so ``0`` addresses index 0.
    """
    if isinstance(path, int):
        return [str(path)]
    if not path:
        return []
    return path.split(SEPARATOR)


def join_path(segments: list[str]) -> str:
    """Join segments back into a dotted path."""
    return SEPARATOR.join(segments)


def _parse_index(segment: str) -> int | None:
    """Return the sequence index spelled by ``segment``, or None."""
    if segment.isdigit() and segment.isascii():
        return int(segment)
    return None


def _child(node: MagicNode, segment: str) -> tuple[MagicNode | None, str | None]:
    """Step one level down from ``node``.

    Returns:
        Tuple of (child, reason) where child is None when the step fails
        and reason describes why.
    """
    if node.kind is NodeKind.MAPPING:
        if segment in node.value:
            return node.value[segment], None
        return None, 'missing key'
    if node.kind is NodeKind.SEQUENCE:
        index = _parse_index(segment)
        if index is None:
            return None, 'not a sequence index'
        if index >= len(node.value):
            return None, f"index out of range (0-{len(node.value) - 1})"
        return node.value[index], None
    return None, 'cannot descend into a scalar'


def resolve(root: MagicNode, path: str | int) -> MagicNode:
    """Return the node at ``path``, failing on the first missing segment.

    Args:
        root: Node to start from.
        path: Dotted path; empty returns ``root``.

    Returns:
        The node at the path.

    Raises:
        PathNotFoundError: If a key is missing, an index is invalid or out
            of range, or the path tries to descend through a scalar.

    Example:
        >>> resolve(wrap({'a': {'b': [10, 20]}}), 'a.b.1').value
        20
    """
    current = root
    walked: list[str] = []
    for segment in split_path(path):
        walked.append(segment)
        current, reason = _child(current, segment)
        if current is None:
            raise PathNotFoundError(segment, join_path(walked), reason)
    return current


def get_value(root: MagicNode, path: str | int, default: Any = None) -> MagicNode | Any:
    """Return the node at ``path`` or ``default`` if it cannot be reached.

    Never raises for a missing path.
    """
    try:
        return resolve(root, path)
    except PathNotFoundError:
        return default


def exists(root: MagicNode, path: str | int) -> bool:
    """True if strict resolution of ``path`` succeeds."""
    try:
        resolve(root, path)
    except PathNotFoundError:
        return False
    return True


def assign(root: MagicNode, path: str, value: Any) -> None:
    """Set ``value`` at ``path``, creating intermediate mappings as needed.

    Args:
        root: A MAPPING node.
        path: Dotted path. Every segment is a mapping key.
        value: Raw value, MagicNode or MagicMap. Stored wrapped.

    Raises:
        InvalidRootError: If ``root`` is not a mapping.
        PathNotFoundError: If ``path`` is empty.
    """
    if root.kind is not NodeKind.MAPPING:
        raise InvalidRootError(root.kind.value)
    segments = split_path(path)
    if not segments:
        raise PathNotFoundError('', '', 'empty path has no final segment')

    # wrap before mutating the tree
    wrapped = wrap(value)
    current = root
    for i, segment in enumerate(segments[:-1]):
        child = current.value.get(segment)
        if child is None or child.kind is not NodeKind.MAPPING:
            if child is not None:
                logger.debug(
                    "Replacing %s at '%s' with a mapping",
                    child.kind.value, join_path(segments[:i + 1]),
                )
            child = MagicNode.mapping()
            current.value[segment] = child
        current = child
    current.value[segments[-1]] = wrapped
