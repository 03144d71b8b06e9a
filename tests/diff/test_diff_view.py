"""Unit tests for diff view traversal helpers."""

from __future__ import annotations

import pytest

from json_tree_engine.diff import (
    DiffEngine,
    DiffNode,
    DiffType,
    Difference,
    ViewMode,
    all_paths,
    changed_paths,
    iter_differences,
    visible_children,
)


@pytest.fixture
def tree() -> DiffNode:
    left = {"name": "John", "age": 30, "address": {"city": "New York", "zip": 10001}}
    right = {"name": "John", "age": 31, "address": {"city": "New York", "zip": 10001}}
    return DiffEngine().diff(left, right)


class TestVisibleChildren:
    def test_diffs_mode_hides_unchanged(self, tree: DiffNode) -> None:
        keys = [key for key, _ in visible_children(tree, ViewMode.DIFFS)]
        assert keys == ["age"]

    def test_full_mode_shows_everything(self, tree: DiffNode) -> None:
        keys = [key for key, _ in visible_children(tree, ViewMode.FULL)]
        assert keys == ["name", "age", "address"]

    def test_ancestors_of_changes_kept(self) -> None:
        node = DiffEngine().diff({"a": {"b": 1}, "c": 1}, {"a": {"b": 2}, "c": 1})
        assert [key for key, _ in visible_children(node)] == ["a"]

    def test_leaf_has_no_children(self) -> None:
        assert list(visible_children(DiffNode(diff_type=DiffType.CHANGED))) == []

    def test_view_mode_values(self) -> None:
        assert ViewMode.DIFFS == "diffs"
        assert ViewMode.FULL == "full"


class TestPaths:
    def test_changed_paths(self, tree: DiffNode) -> None:
        assert changed_paths(tree) == {"root", "root.age"}

    def test_changed_paths_nested(self) -> None:
        node = DiffEngine().diff({"a": {"b": [1, 2]}}, {"a": {"b": [1, 3]}})
        assert changed_paths(node) == {"root", "root.a", "root.a.b", "root.a.b.1"}

    def test_changed_paths_identical(self) -> None:
        node = DiffEngine().diff({"a": 1}, {"a": 1})
        assert changed_paths(node) == {"root"}

    def test_custom_root_path(self, tree: DiffNode) -> None:
        assert changed_paths(tree, root_path="") == {"", "age"}

    def test_all_paths(self, tree: DiffNode) -> None:
        assert all_paths(tree) == {
            "root",
            "root.name",
            "root.age",
            "root.address",
            "root.address.city",
            "root.address.zip",
        }


class TestIterDifferences:
    def test_flat_records(self) -> None:
        node = DiffEngine().diff(
            {"a": 1, "b": {"c": 2}, "d": [1]},
            {"a": 2, "b": {}, "d": [1, 5], "e": True},
        )
        assert list(iter_differences(node)) == [
            Difference(("a",), DiffType.CHANGED, 1, 2),
            Difference(("b", "c"), DiffType.REMOVED, left_value=2),
            Difference(("d", "1"), DiffType.ADDED, right_value=5),
            Difference(("e",), DiffType.ADDED, right_value=True),
        ]

    def test_root_change(self) -> None:
        records = list(iter_differences(DiffEngine().diff(1, "1")))
        assert len(records) == 1
        assert records[0].path == ()
        assert records[0].dotted_path == ""

    def test_dotted_path(self) -> None:
        assert Difference(("a", "0", "b"), DiffType.CHANGED).dotted_path == "a.0.b"

    def test_identical_yields_nothing(self) -> None:
        assert list(iter_differences(DiffEngine().diff([1], [1]))) == []
