"""Path navigation over parsed JSON values.

A path is a sequence of string segments: property names for objects, decimal
indices for arrays.  The empty path addresses the root.  Navigation never
creates containers; every segment must name an existing entry.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from json_tree_engine.values import ABSENT

__all__ = [
    "JsonPath",
    "get_value_at_path",
    "navigate_to_parent",
    "parse_index",
    "path_exists",
    "path_to_string",
    "resolve_segment",
    "string_to_path",
]

JsonPath = Sequence[str]

# Decimal ASCII digits with optional sign and surrounding whitespace
_INDEX_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def parse_index(segment: str, length: int) -> int | None:
    """Parse an array path segment into an index within ``[0, length)``.

    Args:
        segment: Path segment, e.g. ``"3"``.
        length: Length of the array being indexed.

    Returns:
        The index, or ``None`` if the segment is not a plain decimal integer
        or is out of range.  Digit separators (``"1_0"``) and non-ASCII digits
        are rejected.  Negative indices are rejected rather than counted from
        the end.
    """
    if not isinstance(segment, str) or _INDEX_RE.fullmatch(segment) is None:
        return None
    index = int(segment)
    if index < 0 or index >= length:
        return None
    return index


def resolve_segment(container: Any, segment: str) -> Any:
    """Return the child of ``container`` named by ``segment``, or ``ABSENT``."""
    if isinstance(container, list):
        index = parse_index(segment, len(container))
        return ABSENT if index is None else container[index]
    if isinstance(container, dict):
        return container.get(str(segment), ABSENT)
    return ABSENT


def navigate_to_parent(root: Any, path: JsonPath) -> Any:
    """Walk every segment but the last and return the container reached.

    Returns ``ABSENT`` when the path is empty or an intermediate segment does
    not resolve.  The returned value may itself be a primitive when the
    second-to-last segment names one; callers decide how to report that.
    """
    if not path:
        return ABSENT
    current = root
    for segment in path[:-1]:
        current = resolve_segment(current, segment)
        if current is ABSENT:
            return ABSENT
    return current


def get_value_at_path(root: Any, path: JsonPath) -> Any:
    """Return the value at ``path``, ``root`` for the empty path, or ``ABSENT``."""
    current = root
    for segment in path:
        current = resolve_segment(current, segment)
        if current is ABSENT:
            return ABSENT
    return current


def path_exists(root: Any, path: JsonPath) -> bool:
    return get_value_at_path(root, path) is not ABSENT


def path_to_string(path: JsonPath) -> str:
    """Dot-notation form of ``path``, e.g. ``"user.address.city"``."""
    return ".".join(str(segment) for segment in path)


def string_to_path(text: str) -> list[str]:
    """Split a dot-notation string into segments; empty text is the root."""
    if not text:
        return []
    return text.split(".")
