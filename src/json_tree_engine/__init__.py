"""JSON tree engine - structural diff, search and mutation for JSON documents."""

from __future__ import annotations

from json_tree_engine.api import (
    compare,
    delete,
    diff_stats,
    differences,
    find,
    is_identical,
    update,
)
from json_tree_engine.diff import ABSENT, DiffEngine, DiffNode, DiffStats, DiffType, ViewMode
from json_tree_engine.matching import get_strategy, validate_regex
from json_tree_engine.mutation import MutationEngine, MutationError, MutationResult
from json_tree_engine.search import SearchEngine, SearchOptions

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "DiffEngine",
    "DiffNode",
    "DiffStats",
    "DiffType",
    "MutationEngine",
    "MutationError",
    "MutationResult",
    "SearchEngine",
    "SearchOptions",
    "ViewMode",
    "compare",
    "delete",
    "diff_stats",
    "differences",
    "find",
    "get_strategy",
    "is_identical",
    "update",
    "validate_regex",
]
