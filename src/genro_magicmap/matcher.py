# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Glob queries over MagicNode trees.

Every descendant of the root is visited depth-first and its dotted path is
tested against the pattern, segment by segment. Sequence elements appear
in paths under their bare index ('hobbies.0').

Pattern Syntax:
    - Literal segment: must equal the path segment exactly ('user')
    - '*': any single segment, mapping key or sequence index
    - Partial wildcards within one segment: 'user*', 'item?', '[ab]x'
    - '**': zero or more whole segments

Without '**' a pattern only matches paths of the same depth. Matching does
not stop the walk: a matched node's descendants are still tested, and each
matching path yields its own result.

Example:
    >>> root = wrap({'a': {'x': 1}, 'b': {'x': 2, 'c': {'x': 3}}})
    >>> [n.value for n in find_glob(root, '*.x')]
    [1, 2]
    >>> [n.value for n in find_glob(root, '**.x')]
    [1, 2, 3]
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Iterator

from .node import MagicNode
from .paths import SEPARATOR, join_path

logger = logging.getLogger(__name__)

DEEP_WILDCARD = '**'


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> tuple[str, ...]:
    """Split a glob pattern into segments.

    Consecutive '**' segments are collapsed into one.

    Raises:
        ValueError: If the pattern is empty or has an empty segment.
    """
    if not pattern:
        raise ValueError("Glob pattern must not be empty")
    segments: list[str] = []
    for segment in pattern.split(SEPARATOR):
        if not segment:
            raise ValueError(f"Empty segment in glob pattern '{pattern}'")
        if segment == DEEP_WILDCARD and segments and segments[-1] == DEEP_WILDCARD:
            continue
        segments.append(segment)
    return tuple(segments)


def _match(segments: list[str], i: int, pattern: tuple[str, ...], j: int) -> bool:
    while j < len(pattern):
        part = pattern[j]
        if part == DEEP_WILDCARD:
            if j == len(pattern) - 1:
                return True
            return any(
                _match(segments, k, pattern, j + 1)
                for k in range(i, len(segments) + 1)
            )
        if i >= len(segments) or not (
            segments[i] == part or fnmatchcase(segments[i], part)
        ):
            return False
        i += 1
        j += 1
    return i == len(segments)


def match_path(segments: list[str], pattern: str | tuple[str, ...]) -> bool:
    """True if the path made of ``segments`` matches ``pattern``.

    Args:
        segments: Path segments, sequence indices as decimal strings.
        pattern: A glob pattern string or the result of ``compile_pattern``.
    """
    if isinstance(pattern, str):
        pattern = compile_pattern(pattern)
    return _match(segments, 0, pattern, 0)


def iter_paths(root: MagicNode) -> Iterator[tuple[list[str], MagicNode]]:
    """Yield (segments, node) for every descendant of ``root``, depth-first.

    Mapping entries come in insertion order, sequence elements by index.
    The root itself is not yielded.
    """

    def _walk_gen(node: MagicNode, prefix: list[str]) -> Iterator[tuple[list[str], MagicNode]]:
        for segment, child in node.children():
            path = prefix + [segment]
            yield path, child
            if child.is_container:
                yield from _walk_gen(child, path)

    return _walk_gen(root, [])


def find_glob(root: MagicNode, pattern: str) -> list[MagicNode]:
    """Return every node under ``root`` whose path matches ``pattern``.

    Results follow traversal order and are not deduplicated.

    Raises:
        ValueError: If the pattern is empty or malformed.
    """
    compiled = compile_pattern(pattern)
    result = [node for segments, node in iter_paths(root) if match_path(segments, compiled)]
    logger.debug("Glob '%s' matched %d node(s)", pattern, len(result))
    return result


def find_glob_paths(root: MagicNode, pattern: str) -> list[tuple[str, MagicNode]]:
    """Like ``find_glob`` but return (dotted_path, node) pairs."""
    compiled = compile_pattern(pattern)
    return [
        (join_path(segments), node)
        for segments, node in iter_paths(root)
        if match_path(segments, compiled)
    ]
