# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-MagicMap - Path-addressable views over JSON-like data.

A lightweight, zero-dependency library providing dotted-path access,
glob queries and copy-on-write updates over nested dicts and lists
for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidRootError,
    MagicMapError,
    PathNotFoundError,
)
from .magicmap import MagicMap
from .node import MagicNode, NodeKind, unwrap, wrap
from .snapshot import deep_clone

__all__ = [
    # Core classes
    "MagicMap",
    "MagicNode",
    "NodeKind",
    # Node conversion
    "wrap",
    "unwrap",
    "deep_clone",
    # Exceptions
    "MagicMapError",
    "InvalidRootError",
    "PathNotFoundError",
]
