"""Integration tests for the json-tree-engine pytest plugin.

These tests verify that the assert_json_unchanged fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-tree-engine to be installed (even in editable
mode via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest


def test_fixture_passes_identical_docs(assert_json_unchanged: Any) -> None:
    assert_json_unchanged({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})


def test_fixture_ignores_key_order(assert_json_unchanged: Any) -> None:
    assert_json_unchanged({"b": 2, "a": 1}, {"a": 1, "b": 2})


def test_fixture_fails_on_change(assert_json_unchanged: Any) -> None:
    with pytest.raises(AssertionError, match=r"changed at age: 30 -> 31"):
        assert_json_unchanged({"age": 31}, {"age": 30})


def test_fixture_error_message_contents(assert_json_unchanged: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_unchanged({"new": 1, "tags": ["x"]}, {"old": 1, "tags": []})

    message = str(exc_info.value)
    assert "JSON documents differ (3 difference(s))" in message
    assert "removed at old: 1 -> ABSENT" in message
    assert "added at new: ABSENT -> 1" in message
    assert "added at tags.0: ABSENT -> 'x'" in message


def test_fixture_root_change(assert_json_unchanged: Any) -> None:
    with pytest.raises(AssertionError, match=r"changed at <root>"):
        assert_json_unchanged([1], {"a": 1})


def test_fixture_truncates_long_reports(assert_json_unchanged: Any) -> None:
    expected = {f"k{i}": i for i in range(25)}
    with pytest.raises(AssertionError, match=r"\.\.\. 5 more"):
        assert_json_unchanged({}, expected)


def test_fixture_returns_callable(assert_json_unchanged: Any) -> None:
    assert callable(assert_json_unchanged), (
        "assert_json_unchanged fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_unchanged appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent,
    )
    assert "assert_json_unchanged" in result.stdout, (
        "Fixture not discovered via pytest11 entry point; is the package installed?"
    )
