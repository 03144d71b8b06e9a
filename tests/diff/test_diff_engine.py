"""Unit tests for DiffEngine and DiffNode.

Tests cover:
- Identity (a value diffed against itself has no changes)
- Primitive classification (equal, changed, type change)
- Object key union and ordering
- Positional array diffing
- has_changes propagation
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_engine.diff import ABSENT, DiffEngine, DiffNode, DiffType, has_changes


@pytest.fixture
def engine() -> DiffEngine:
    return DiffEngine()


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class TestIdentity:
    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            0,
            1.5,
            "text",
            [],
            {},
            [1, [2, {"a": None}]],
            {"a": {"b": [1, 2, 3]}, "c": "x"},
        ],
    )
    def test_self_diff_has_no_changes(self, engine: DiffEngine, value: Any) -> None:
        assert not has_changes(engine.diff(value, value))

    def test_both_absent(self, engine: DiffEngine) -> None:
        node = engine.diff(ABSENT, ABSENT)
        assert node.diff_type == DiffType.UNCHANGED


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class TestPrimitives:
    def test_equal_primitives_unchanged(self, engine: DiffEngine) -> None:
        node = engine.diff(5, 5)
        assert node.diff_type == DiffType.UNCHANGED
        assert node.left_value == 5
        assert node.right_value == 5
        assert node.children is None

    def test_different_values_changed(self, engine: DiffEngine) -> None:
        node = engine.diff("New York", "Boston")
        assert node.diff_type == DiffType.CHANGED
        assert node.left_value == "New York"
        assert node.right_value == "Boston"

    def test_type_change(self, engine: DiffEngine) -> None:
        node = engine.diff(10001, "02108")
        assert node.diff_type == DiffType.CHANGED
        assert node.children is None

    def test_bool_vs_number_is_changed(self, engine: DiffEngine) -> None:
        # True == 1 in Python, but the JSON types differ
        assert engine.diff(True, 1).diff_type == DiffType.CHANGED

    def test_int_vs_float_same_number(self, engine: DiffEngine) -> None:
        assert engine.diff(1, 1.0).diff_type == DiffType.UNCHANGED

    def test_null_vs_value(self, engine: DiffEngine) -> None:
        assert engine.diff(None, "x").diff_type == DiffType.CHANGED

    def test_array_vs_object_is_changed(self, engine: DiffEngine) -> None:
        node = engine.diff([1], {"0": 1})
        assert node.diff_type == DiffType.CHANGED
        assert node.children is None


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


class TestObjects:
    def test_added_key(self, engine: DiffEngine) -> None:
        node = engine.diff({"a": 1}, {"a": 1, "b": 2})
        assert node.diff_type == DiffType.UNCHANGED
        assert node.children is not None
        added = node.children["b"]
        assert added.diff_type == DiffType.ADDED
        assert added.right_value == 2
        assert added.left_value is ABSENT

    def test_removed_key(self, engine: DiffEngine) -> None:
        node = engine.diff({"a": 1, "b": 2}, {"a": 1})
        assert node.children is not None
        removed = node.children["b"]
        assert removed.diff_type == DiffType.REMOVED
        assert removed.left_value == 2
        assert removed.right_value is ABSENT

    def test_union_of_keys(self, engine: DiffEngine) -> None:
        left = {"a": 1, "b": 2, "c": 3}
        right = {"b": 2, "d": 4, "a": 9}
        node = engine.diff(left, right)
        assert node.children is not None
        assert set(node.children) == set(left) | set(right)

    def test_key_order_left_then_right_only(self, engine: DiffEngine) -> None:
        node = engine.diff({"z": 1, "a": 2}, {"m": 3, "a": 2, "b": 4})
        assert node.children is not None
        assert list(node.children) == ["z", "a", "m", "b"]

    def test_added_container_has_no_children(self, engine: DiffEngine) -> None:
        node = engine.diff({}, {"new": {"x": 1}})
        assert node.children is not None
        added = node.children["new"]
        assert added.diff_type == DiffType.ADDED
        assert added.children is None
        assert added.right_value == {"x": 1}

    def test_nested_change_propagates(self, engine: DiffEngine) -> None:
        node = engine.diff({"a": {"b": {"c": 1}}}, {"a": {"b": {"c": 2}}})
        assert node.diff_type == DiffType.UNCHANGED
        assert node.has_changes()
        assert node.children is not None
        assert node.children["a"].has_changes()


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArrays:
    def test_string_index_keys(self, engine: DiffEngine) -> None:
        node = engine.diff([1, 2], [1, 2])
        assert node.children is not None
        assert list(node.children) == ["0", "1"]

    def test_appended_element(self, engine: DiffEngine) -> None:
        node = engine.diff([1], [1, 2])
        assert node.children is not None
        assert node.children["0"].diff_type == DiffType.UNCHANGED
        assert node.children["1"].diff_type == DiffType.ADDED

    def test_truncated_array(self, engine: DiffEngine) -> None:
        node = engine.diff([1, 2, 3], [1])
        assert node.children is not None
        assert [c.diff_type for c in node.children.values()] == [
            DiffType.UNCHANGED,
            DiffType.REMOVED,
            DiffType.REMOVED,
        ]

    def test_middle_insertion_is_positional(self, engine: DiffEngine) -> None:
        node = engine.diff(["a", "c"], ["a", "b", "c"])
        assert node.children is not None
        assert [c.diff_type for c in node.children.values()] == [
            DiffType.UNCHANGED,
            DiffType.CHANGED,
            DiffType.ADDED,
        ]


# ---------------------------------------------------------------------------
# DiffNode
# ---------------------------------------------------------------------------


class TestDiffNode:
    def test_defaults(self) -> None:
        node = DiffNode(diff_type=DiffType.ADDED)
        assert node.left_value is ABSENT
        assert node.right_value is ABSENT
        assert node.children is None
        assert not node.is_container

    def test_unchanged_leaf_has_no_changes(self) -> None:
        assert not DiffNode(diff_type=DiffType.UNCHANGED).has_changes()

    def test_empty_children(self) -> None:
        node = DiffNode(diff_type=DiffType.UNCHANGED, children={})
        assert node.is_container
        assert not node.has_changes()

    def test_diff_type_values(self) -> None:
        assert [t.value for t in DiffType] == ["added", "removed", "changed", "unchanged"]

    def test_has_changes_function_matches_method(self, engine: DiffEngine) -> None:
        node = engine.diff({"a": [1]}, {"a": [2]})
        assert has_changes(node) is node.has_changes() is True
