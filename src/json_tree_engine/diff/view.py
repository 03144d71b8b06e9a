"""Traversal helpers for presenting a diff tree.

The comparator view has two modes: ``diffs`` shows only branches that lead to
a change, ``full`` shows every node.  These helpers make the traversal
decisions so the renderer only walks and draws.

Expansion paths use dotted strings rooted at ``"root"`` (``"root.address.city"``),
the same keys the viewer uses to remember which branches are open.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_engine.diff.nodes import ABSENT, DiffNode, DiffType

__all__ = [
    "ROOT_PATH",
    "Difference",
    "ViewMode",
    "all_paths",
    "changed_paths",
    "iter_differences",
    "visible_children",
]

ROOT_PATH = "root"


class ViewMode(StrEnum):
    """Diff view mode.

    - DIFFS -> "diffs" : hide unchanged branches with no changed descendants
    - FULL  -> "full"  : show everything
    """

    DIFFS = auto()
    FULL = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """One added, removed, or changed position in flat (list) form.

    Attributes:
        path: Segments from the root to the position; usable directly as a
            mutation path.
        diff_type: ADDED, REMOVED or CHANGED.
        left_value: Left value or ``ABSENT``.
        right_value: Right value or ``ABSENT``.
    """

    path: tuple[str, ...]
    diff_type: DiffType
    left_value: Any = ABSENT
    right_value: Any = ABSENT

    @property
    def dotted_path(self) -> str:
        """Path joined with dots; empty string for the root."""
        return ".".join(self.path)


def visible_children(
    node: DiffNode, mode: ViewMode = ViewMode.DIFFS
) -> Iterator[tuple[str, DiffNode]]:
    """Yield the ``(key, child)`` pairs to render under ``node``.

    In ``DIFFS`` mode an UNCHANGED child is skipped unless some descendant
    changed; ancestors of a change are therefore kept.  ``FULL`` mode yields
    every child.
    """
    if not node.children:
        return
    for key, child in node.children.items():
        if mode == ViewMode.DIFFS and not child.has_changes():
            continue
        yield key, child


def _join(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def changed_paths(node: DiffNode, root_path: str = ROOT_PATH) -> set[str]:
    """Return the paths to expand so every change is visible.

    The root path is always included.  A branch path is included when the
    branch has changes, together with its parent path.
    """
    paths = {root_path}

    def _collect(current: DiffNode, path: str) -> None:
        if not current.children:
            return
        for key, child in current.children.items():
            if child.has_changes():
                child_path = _join(path, key)
                paths.add(path)
                paths.add(child_path)
                _collect(child, child_path)

    _collect(node, root_path)
    return paths


def all_paths(node: DiffNode, root_path: str = ROOT_PATH) -> set[str]:
    """Return the path of every node in the tree (the "expand all" set)."""
    paths = {root_path}

    def _collect(current: DiffNode, path: str) -> None:
        if not current.children:
            return
        for key, child in current.children.items():
            child_path = _join(path, key)
            paths.add(child_path)
            _collect(child, child_path)

    _collect(node, root_path)
    return paths


def iter_differences(
    node: DiffNode, path: tuple[str, ...] = ()
) -> Iterator[Difference]:
    """Yield a ``Difference`` for every non-UNCHANGED node, depth first.

    Children are visited in tree key order, so the output is stable for a
    given pair of documents.
    """
    if node.diff_type != DiffType.UNCHANGED:
        yield Difference(
            path=path,
            diff_type=node.diff_type,
            left_value=node.left_value,
            right_value=node.right_value,
        )
    if node.children:
        for key, child in node.children.items():
            yield from iter_differences(child, (*path, key))
