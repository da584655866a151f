# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deep clone and copy-on-write assignment.

Every immutable update copies the whole tree: there is no structural
sharing between a snapshot and its source, apart from scalar leaves.
"""

from __future__ import annotations

import logging
from typing import Any

from .node import MagicNode, NodeKind
from .paths import assign

logger = logging.getLogger(__name__)


def deep_clone(node: MagicNode) -> MagicNode:
    """Return an independent copy of ``node``.

    MAPPING and SEQUENCE containers are rebuilt at every level. SCALAR
    nodes are copied too, but their raw value is shared.
    """
    if node.kind is NodeKind.MAPPING:
        return MagicNode(
            NodeKind.MAPPING,
            {label: deep_clone(child) for label, child in node.value.items()},
        )
    if node.kind is NodeKind.SEQUENCE:
        return MagicNode(NodeKind.SEQUENCE, [deep_clone(child) for child in node.value])
    return MagicNode(NodeKind.SCALAR, node.value)


def assign_immutable(root: MagicNode, path: str, value: Any) -> MagicNode:
    """Return a clone of ``root`` with ``value`` set at ``path``.

    ``root`` is left untouched, also when the assignment fails.

    Raises:
        InvalidRootError: If ``root`` is not a mapping.
        PathNotFoundError: If ``path`` is empty.
    """
    clone = deep_clone(root)
    logger.debug("Cloned tree for immutable set of '%s'", path)
    assign(clone, path, value)
    return clone
