"""MutationEngine: pure, path-addressed update and delete over JSON trees.

Every operation deep-clones the input root and edits the clone, so the
caller's value is never modified.  Failures are returned as
``MutationResult`` values carrying a ``MutationError`` category and a
message; nothing is raised for bad paths.

Deleting from an array splices the element out: every later sibling shifts
down one index.  Paths computed before a deletion may be stale afterwards;
``apply_all`` applies operations strictly in order, so later paths must be
written against the already-shifted indices.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_engine.mutation.paths import (
    JsonPath,
    navigate_to_parent,
    parse_index,
    path_to_string,
)
from json_tree_engine.mutation.result import MutationError, MutationResult
from json_tree_engine.values import ABSENT, deep_clone

__all__ = ["MutationEngine", "MutationOperation", "MutationType"]

logger = logging.getLogger(__name__)


class MutationType(StrEnum):
    """Kinds of mutation supported by ``MutationEngine.apply``."""

    UPDATE = auto()
    DELETE = auto()


@dataclass(frozen=True, slots=True)
class MutationOperation:
    """Descriptor of one user edit.

    Attributes:
        mutation_type: UPDATE or DELETE.
        path: Target path segments.
        value: New value for UPDATE; ignored for DELETE.
    """

    mutation_type: MutationType
    path: tuple[str, ...]
    value: Any = None


def _reject(kind: MutationError, message: str) -> MutationResult:
    logger.debug("Mutation rejected (%s): %s", kind, message)
    return MutationResult.fail(kind, message)


class MutationEngine:
    """Stateless update/delete service.

    Example::

        from json_tree_engine.mutation import MutationEngine

        engine = MutationEngine()
        doc = {"tags": ["a", "b", "c"]}

        result = engine.delete(doc, ["tags", "0"])
        result.data        # {"tags": ["b", "c"]}
        doc                # unchanged: {"tags": ["a", "b", "c"]}

        engine.update(doc, [], 1).error   # "Cannot update root - path is empty"
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def update(self, root: Any, path: JsonPath, new_value: Any) -> MutationResult:
        """Return a copy of ``root`` with the entry at ``path`` set to ``new_value``.

        Object parents accept any property name (an existing key is
        overwritten, a new key is added).  Array parents require an existing
        index; arrays are never extended.

        Args:
            root: The current JSON document.
            path: Segments addressing the entry to write.  Must be non-empty.
            new_value: Replacement JSON value (copied into the result).

        Returns:
            ``MutationResult`` holding the new root, or an
            ``INVALID_OPERATION`` (empty path) / ``INVALID_PATH`` failure.
        """
        if not path:
            return _reject(
                MutationError.INVALID_OPERATION, "Cannot update root - path is empty"
            )

        cloned = deep_clone(root)
        parent = navigate_to_parent(cloned, path)
        if parent is ABSENT:
            return _reject(MutationError.INVALID_PATH, f"Invalid path: {path_to_string(path)}")

        last = str(path[-1])
        if isinstance(parent, dict):
            parent[last] = deep_clone(new_value)
        elif isinstance(parent, list):
            index = parse_index(last, len(parent))
            if index is None:
                return _reject(MutationError.INVALID_PATH, f"Invalid array index: {last}")
            parent[index] = deep_clone(new_value)
        else:
            return _reject(MutationError.INVALID_PATH, f"Invalid path: {path_to_string(path)}")

        return MutationResult.ok(cloned)

    def delete(self, root: Any, path: JsonPath) -> MutationResult:
        """Return a copy of ``root`` without the entry at ``path``.

        Object entries are removed by name.  Array entries are spliced out,
        shifting later elements down by one.

        Args:
            root: The current JSON document.
            path: Segments addressing the entry to remove.  Must be non-empty.

        Returns:
            ``MutationResult`` holding the new root, or a failure:
            ``INVALID_OPERATION`` for an empty path or a primitive parent,
            ``INVALID_PATH`` for a missing key, bad index, or unresolvable
            intermediate segment.
        """
        if not path:
            return _reject(MutationError.INVALID_OPERATION, "Cannot delete root")

        cloned = deep_clone(root)
        if len(path) == 1:
            parent = cloned
        else:
            parent = navigate_to_parent(cloned, path)
            if parent is ABSENT:
                return _reject(
                    MutationError.INVALID_PATH, f"Invalid path: {path_to_string(path)}"
                )

        last = str(path[-1])
        if isinstance(parent, list):
            index = parse_index(last, len(parent))
            if index is None:
                return _reject(MutationError.INVALID_PATH, f"Invalid array index: {last}")
            del parent[index]
        elif isinstance(parent, dict):
            if last not in parent:
                return _reject(
                    MutationError.INVALID_PATH, f"Invalid path: {path_to_string(path)}"
                )
            del parent[last]
        else:
            return _reject(
                MutationError.INVALID_OPERATION, "Cannot delete from primitive value"
            )

        return MutationResult.ok(cloned)

    def apply(self, root: Any, operation: MutationOperation) -> MutationResult:
        """Dispatch a ``MutationOperation`` to ``update`` or ``delete``."""
        if operation.mutation_type == MutationType.UPDATE:
            return self.update(root, operation.path, operation.value)
        return self.delete(root, operation.path)

    def apply_all(
        self, root: Any, operations: Iterable[MutationOperation]
    ) -> MutationResult:
        """Apply operations in order, stopping at the first failure.

        Each operation sees the result of the previous one, including index
        shifts caused by array deletions.  On failure the returned result is
        that operation's failure; earlier successes are discarded.
        """
        result = MutationResult.ok(deep_clone(root))
        for operation in operations:
            result = self.apply(result.data, operation)
            if not result.success:
                return result
        return result
