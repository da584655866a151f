# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON text in and out of raw trees."""

from __future__ import annotations

import json
from typing import Any, Callable

LeafTransform = Callable[[Any], Any]


def loads(text: str | bytes) -> Any:
    """Parse JSON text into raw dicts, lists and scalars.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
    """
    return json.loads(text)


def apply_transform(raw: Any, transform: LeafTransform) -> Any:
    """Return a copy of ``raw`` with ``transform`` applied to every leaf."""
    if isinstance(raw, dict):
        return {key: apply_transform(value, transform) for key, value in raw.items()}
    if isinstance(raw, list):
        return [apply_transform(value, transform) for value in raw]
    return transform(raw)


def dumps(
    raw: Any,
    indent: int | None = None,
    transform: LeafTransform | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize a raw tree to JSON text.

    Args:
        raw: Plain dicts, lists and scalars.
        indent: Indentation width, None for compact single-line output.
        transform: Optional callable applied to each leaf before encoding,
            e.g. to turn datetimes into strings.
        sort_keys: Sort mapping keys in the output.

    Raises:
        TypeError: If a leaf is not JSON serializable after ``transform``.
    """
    if transform is not None:
        raw = apply_transform(raw, transform)
    return json.dumps(raw, indent=indent, sort_keys=sort_keys)
