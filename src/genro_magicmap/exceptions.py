# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MagicMap exceptions."""

from __future__ import annotations


class MagicMapError(Exception):
    """Base exception for MagicMap errors."""

    pass


class InvalidRootError(MagicMapError, TypeError):
    """Raised when a write is attempted on a root that is not a mapping."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Cannot set a path on a {kind} root, a mapping is required")


class PathNotFoundError(MagicMapError, KeyError):
    """Raised when strict path resolution cannot reach a segment.

    Attributes:
        segment: The first segment that could not be resolved.
        path: The dotted path walked so far, ending with ``segment``.
    """

    def __init__(self, segment: str, path: str, reason: str | None = None) -> None:
        self.segment = segment
        self.path = path
        self.reason = reason
        message = f"Path segment '{segment}' not found at '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
