"""Unit tests for DiffStats and compute_stats."""

from __future__ import annotations

from json_tree_engine.diff import DiffEngine, DiffStats, compute_stats


def _stats(left: object, right: object) -> DiffStats:
    return compute_stats(DiffEngine().diff(left, right))


class TestComputeStats:
    def test_identical(self) -> None:
        stats = _stats({"a": 1, "b": [1, 2]}, {"a": 1, "b": [1, 2]})
        assert stats == DiffStats(unchanged=3)
        assert not stats.has_changes

    def test_mixed(self) -> None:
        stats = _stats(
            {"keep": 1, "edit": "x", "drop": True},
            {"keep": 1, "edit": "y", "new": None},
        )
        assert stats == DiffStats(additions=1, deletions=1, modifications=1, unchanged=1)
        assert stats.total == 4
        assert stats.has_changes

    def test_added_container_counts_once(self) -> None:
        stats = _stats({}, {"obj": {"a": 1, "b": 2}})
        assert stats.additions == 1

    def test_type_change_counts_once(self) -> None:
        stats = _stats({"v": [1, 2, 3]}, {"v": {"a": 1}})
        assert stats == DiffStats(modifications=1)

    def test_empty_containers_are_unchanged_leaves(self) -> None:
        assert _stats({"a": []}, {"a": []}) == DiffStats(unchanged=1)

    def test_primitive_root(self) -> None:
        assert _stats(1, 2) == DiffStats(modifications=1)


class TestDiffStats:
    def test_defaults(self) -> None:
        stats = DiffStats()
        assert stats.total == 0
        assert not stats.has_changes
