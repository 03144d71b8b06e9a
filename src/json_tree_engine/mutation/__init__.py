"""mutation subpackage: public API for pure update/delete and path helpers."""

from __future__ import annotations

from json_tree_engine.mutation.engine import (
    MutationEngine,
    MutationOperation,
    MutationType,
)
from json_tree_engine.mutation.paths import (
    JsonPath,
    get_value_at_path,
    path_exists,
    path_to_string,
    string_to_path,
)
from json_tree_engine.mutation.result import MutationError, MutationResult

__all__ = [
    "JsonPath",
    "MutationEngine",
    "MutationError",
    "MutationOperation",
    "MutationResult",
    "MutationType",
    "get_value_at_path",
    "path_exists",
    "path_to_string",
    "string_to_path",
]
