"""Public API functions for json-tree-engine.

Each call creates a fresh engine to guarantee zero shared state between
calls.  Long-lived callers that search on every keystroke should hold their
own ``SearchEngine`` instead, so compiled regular expressions are reused.
"""

from __future__ import annotations

from typing import Any

from json_tree_engine.diff.engine import DiffEngine
from json_tree_engine.diff.nodes import DiffNode
from json_tree_engine.diff.stats import DiffStats, compute_stats
from json_tree_engine.diff.view import Difference, iter_differences
from json_tree_engine.mutation.engine import MutationEngine
from json_tree_engine.mutation.paths import JsonPath
from json_tree_engine.mutation.result import MutationResult
from json_tree_engine.search.engine import SearchEngine
from json_tree_engine.search.options import SearchOptions

__all__ = [
    "compare",
    "delete",
    "diff_stats",
    "differences",
    "find",
    "is_identical",
    "update",
]


def compare(left: Any, right: Any) -> DiffNode:
    """Compare two JSON values and return the root of the diff tree.

    Args:
        left:  First JSON value (dict, list, str, int, float, bool, None).
        right: Second JSON value.

    Returns:
        Root ``DiffNode``.  Query ``has_changes()`` on it to learn whether the
        documents differ anywhere.
    """
    return DiffEngine().diff(left, right)


def is_identical(left: Any, right: Any) -> bool:
    """Return True if the diff of the two values contains no changes."""
    return not compare(left, right).has_changes()


def diff_stats(left: Any, right: Any) -> DiffStats:
    """Return addition/deletion/modification/unchanged leaf counts."""
    return compute_stats(compare(left, right))


def differences(left: Any, right: Any) -> list[Difference]:
    """Return every added, removed, or changed position as a flat list."""
    return list(iter_differences(compare(left, right)))


def find(value: Any, options: SearchOptions) -> bool:
    """Return True if ``value`` or anything below it matches ``options``.

    Honours every toggle of ``options`` except ``search_level`` (which only
    affects highlighting) and ``filter_enabled`` (which only affects
    visibility decisions).
    """
    return SearchEngine().deep_search(
        value,
        options.search_text,
        fuzzy=options.fuzzy_enabled,
        case_sensitive=options.case_sensitive,
        regex=options.regex_enabled,
        keys_only=options.keys_only,
    )


def update(root: Any, path: JsonPath, new_value: Any) -> MutationResult:
    """Return a new document with the entry at ``path`` replaced."""
    return MutationEngine().update(root, path, new_value)


def delete(root: Any, path: JsonPath) -> MutationResult:
    """Return a new document without the entry at ``path``."""
    return MutationEngine().delete(root, path)
