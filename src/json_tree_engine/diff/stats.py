"""DiffStats: per-classification counts summarising a diff tree.

Only leaves are counted: nodes without children.  A container that exists on
both sides contributes through its children; a container that was added,
removed, or replaced by a different type counts once.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_engine.diff.nodes import DiffNode, DiffType

__all__ = ["DiffStats", "compute_stats"]


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Counts of leaf classifications in a diff tree.

    Attributes:
        additions:     ADDED leaves.
        deletions:     REMOVED leaves.
        modifications: CHANGED leaves.
        unchanged:     UNCHANGED leaves (empty containers included).
    """

    additions: int = 0
    deletions: int = 0
    modifications: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.additions + self.deletions + self.modifications + self.unchanged

    @property
    def has_changes(self) -> bool:
        return bool(self.additions or self.deletions or self.modifications)


def compute_stats(node: DiffNode) -> DiffStats:
    """Walk the tree once and count leaf classifications.

    Args:
        node: Root of a diff tree.

    Returns:
        A ``DiffStats`` summary.
    """
    counts = {diff_type: 0 for diff_type in DiffType}
    stack = [node]
    while stack:
        current = stack.pop()
        if current.children:
            stack.extend(current.children.values())
        else:
            counts[current.diff_type] += 1

    return DiffStats(
        additions=counts[DiffType.ADDED],
        deletions=counts[DiffType.REMOVED],
        modifications=counts[DiffType.CHANGED],
        unchanged=counts[DiffType.UNCHANGED],
    )
