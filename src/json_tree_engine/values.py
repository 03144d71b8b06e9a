"""JsonValueType StrEnum and classification helpers for parsed JSON values.

Provides the shared primitives used by the search, diff, and mutation
engines to tell containers from primitives and to render primitives the way
they appear in JSON text.

Dispatch order matters: ``bool`` MUST be checked before ``int`` because
``bool`` subclasses ``int`` in Python (``isinstance(True, int)`` is True).
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from enum import Enum, StrEnum, auto
from typing import Any, Final

__all__ = [
    "ABSENT",
    "JsonValue",
    "JsonValueType",
    "child_items",
    "deep_clone",
    "is_container",
    "primitive_text",
    "value_type",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class _Absent(Enum):
    """Sentinel type for "no value at this position" (distinct from JSON null)."""

    ABSENT = auto()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent.ABSENT


class JsonValueType(StrEnum):
    """Type tag of a JSON value.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    - UNKNOWN -> "unknown" : any Python object that is not a JSON value
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()
    UNKNOWN = auto()


def value_type(value: Any) -> JsonValueType:
    """Return the JSON type tag of ``value``.

    Args:
        value: Any Python value, normally one produced by ``json.loads``.

    Returns:
        The matching ``JsonValueType``; ``UNKNOWN`` for non-JSON objects.
    """
    # CRITICAL: bool before int
    if isinstance(value, bool):
        return JsonValueType.BOOLEAN
    if value is None:
        return JsonValueType.NULL
    if isinstance(value, str):
        return JsonValueType.STRING
    if isinstance(value, (int, float)):
        return JsonValueType.NUMBER
    if isinstance(value, list):
        return JsonValueType.ARRAY
    if isinstance(value, dict):
        return JsonValueType.OBJECT
    return JsonValueType.UNKNOWN


def is_container(value: Any) -> bool:
    """True for JSON objects and arrays."""
    return isinstance(value, (dict, list))


def child_items(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, child)`` pairs of a container.

    Object entries are yielded in insertion order.  Array entries use the
    string form of their index as the key, matching the path segment format.
    Primitives yield nothing.
    """
    if isinstance(value, dict):
        yield from value.items()
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            yield str(idx), item


def primitive_text(value: Any) -> str:
    """Render a primitive the way it appears in JSON text.

    ``True``/``False``/``None`` become ``"true"``/``"false"``/``"null"`` so
    that a search for ``"true"`` finds boolean values.  Strings are returned
    unquoted; numbers use ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def deep_clone(value: JsonValue) -> JsonValue:
    """Return a deep copy of a JSON value (never shares containers)."""
    return copy.deepcopy(value)
