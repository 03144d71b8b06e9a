"""diff subpackage: public API for structural JSON comparison.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from json_tree_engine.diff import DiffEngine, ViewMode, compute_stats, visible_children

    tree = DiffEngine().diff(left_doc, right_doc)
    if not tree.has_changes():
        print("Documents are identical")
    stats = compute_stats(tree)
    for key, child in visible_children(tree, ViewMode.DIFFS):
        ...
"""

from __future__ import annotations

from json_tree_engine.diff.engine import DiffEngine, has_changes
from json_tree_engine.diff.nodes import ABSENT, DiffNode, DiffType
from json_tree_engine.diff.stats import DiffStats, compute_stats
from json_tree_engine.diff.view import (
    Difference,
    ViewMode,
    all_paths,
    changed_paths,
    iter_differences,
    visible_children,
)

__all__ = [
    "ABSENT",
    "DiffEngine",
    "DiffNode",
    "DiffStats",
    "DiffType",
    "Difference",
    "ViewMode",
    "all_paths",
    "changed_paths",
    "compute_stats",
    "has_changes",
    "iter_differences",
    "visible_children",
]
