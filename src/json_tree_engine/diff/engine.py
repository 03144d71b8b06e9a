"""DiffEngine: recursive structural comparison of two JSON values.

Algorithm (per position):

1. One side ABSENT (key present on only one side) -> ADDED / REMOVED.
2. Different JSON type tags (including array vs object, bool vs number)
   -> CHANGED with both raw values; no diffing across type boundaries.
3. Two objects / two arrays -> UNCHANGED with one child per key in the union
   of keys, each diffed recursively with ABSENT for a missing side.
4. Two primitives of the same type -> UNCHANGED if equal, else CHANGED.

Key order is deterministic: left keys in document order, then right-only keys
in document order.  Arrays are compared positionally by index; an insertion in
the middle of an array shows as a cascade of index-wise changes plus an
addition at the tail.  There is no LCS alignment of array elements.
"""

from __future__ import annotations

from typing import Any

from json_tree_engine.diff.nodes import ABSENT, DiffNode, DiffType
from json_tree_engine.values import JsonValueType, value_type

__all__ = ["DiffEngine", "has_changes"]


def has_changes(node: DiffNode) -> bool:
    """Return True if ``node`` or any of its descendants is not UNCHANGED.

    Used to report "documents are identical" at the root and to prune
    unchanged branches in diffs-only views.
    """
    return node.has_changes()


class DiffEngine:
    """Stateless builder of ``DiffNode`` trees.

    A full tree is rebuilt from scratch on every ``diff`` call.

    Example::

        from json_tree_engine.diff import DiffEngine, DiffType

        tree = DiffEngine().diff({"a": 1}, {"a": 1, "b": 2})
        tree.children["b"].diff_type    # DiffType.ADDED
        tree.children["b"].right_value  # 2
        tree.has_changes()              # True
    """

    def diff(self, left: Any, right: Any) -> DiffNode:
        """Compare two JSON values and return the root diff node.

        Args:
            left:  The left (original) JSON value, or ``ABSENT``.
            right: The right (new) JSON value, or ``ABSENT``.

        Returns:
            Root ``DiffNode`` of the diff tree.
        """
        if left is ABSENT and right is ABSENT:
            return DiffNode(diff_type=DiffType.UNCHANGED)
        if left is ABSENT:
            return DiffNode(diff_type=DiffType.ADDED, right_value=right)
        if right is ABSENT:
            return DiffNode(diff_type=DiffType.REMOVED, left_value=left)

        left_type = value_type(left)
        if left_type != value_type(right):
            return DiffNode(
                diff_type=DiffType.CHANGED, left_value=left, right_value=right
            )

        if left_type == JsonValueType.OBJECT:
            return self._diff_objects(left, right)
        if left_type == JsonValueType.ARRAY:
            return self._diff_arrays(left, right)

        diff_type = DiffType.UNCHANGED if left == right else DiffType.CHANGED
        return DiffNode(diff_type=diff_type, left_value=left, right_value=right)

    def _diff_objects(self, left: dict[str, Any], right: dict[str, Any]) -> DiffNode:
        children: dict[str, DiffNode] = {}
        for key, left_child in left.items():
            children[key] = self.diff(left_child, right.get(key, ABSENT))
        for key, right_child in right.items():
            if key not in left:
                children[key] = self.diff(ABSENT, right_child)
        return DiffNode(
            diff_type=DiffType.UNCHANGED,
            left_value=left,
            right_value=right,
            children=children,
        )

    def _diff_arrays(self, left: list[Any], right: list[Any]) -> DiffNode:
        children: dict[str, DiffNode] = {}
        for idx in range(max(len(left), len(right))):
            left_child = left[idx] if idx < len(left) else ABSENT
            right_child = right[idx] if idx < len(right) else ABSENT
            children[str(idx)] = self.diff(left_child, right_child)
        return DiffNode(
            diff_type=DiffType.UNCHANGED,
            left_value=left,
            right_value=right,
            children=children,
        )
