"""DiffNode dataclass, DiffType StrEnum and the ABSENT sentinel.

A diff tree mirrors the union of two JSON documents: each node records how
one position compares between the left and right document, and container
positions carry one child per key present on either side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_engine.values import ABSENT

__all__ = ["ABSENT", "DiffNode", "DiffType"]


class DiffType(StrEnum):
    """Classification of one position in a diff tree.

    - ADDED     -> "added"     : present only in the right document
    - REMOVED   -> "removed"   : present only in the left document
    - CHANGED   -> "changed"   : present in both with different values or types
    - UNCHANGED -> "unchanged" : equal primitives, or two containers of the
                                 same kind (whose children may still differ)
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()
    UNCHANGED = auto()


@dataclass(slots=True)
class DiffNode:
    """A node in a diff tree.

    Attributes:
        diff_type:   Classification of this position (see DiffType).
        left_value:  Raw left value, or ``ABSENT`` for additions.
        right_value: Raw right value, or ``ABSENT`` for removals.
        children:    Per-key child nodes when both sides are containers of the
                     same kind; ``None`` otherwise.  Object keys keep left
                     order followed by right-only keys; array keys are string
                     indices.

    ``diff_type`` describes only this node's own value.  Whether anything in
    the subtree differs is the derived query ``has_changes``.
    """

    diff_type: DiffType
    left_value: Any = ABSENT
    right_value: Any = ABSENT
    children: dict[str, DiffNode] | None = None

    @property
    def is_container(self) -> bool:
        """True when this node carries per-key children."""
        return self.children is not None

    def has_changes(self) -> bool:
        """True if this node or any descendant is not UNCHANGED."""
        if self.diff_type != DiffType.UNCHANGED:
            return True
        if self.children:
            return any(child.has_changes() for child in self.children.values())
        return False
