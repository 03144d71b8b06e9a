"""pytest plugin for json-tree-engine.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_engine import differences

# Differences listed in a failure message before truncating
_MAX_REPORTED = 20


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to differences() which creates a fresh DiffEngine per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

        def test_detects_edit(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"changed at age"):
                assert_json_unchanged({"age": 31}, {"age": 30})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` listing every difference when the documents differ.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two JSON documents have no structural differences.

        Args:
            actual:   The JSON value produced by the code under test (right side).
            expected: The reference JSON value (left side).

        Raises:
            AssertionError: When any position is added, removed, or changed.
        """
        found = differences(expected, actual)
        if not found:
            return

        lines = []
        for item in found[:_MAX_REPORTED]:
            where = item.dotted_path or "<root>"
            lines.append(
                f"  {item.diff_type} at {where}: {item.left_value!r} -> {item.right_value!r}"
            )
        if len(found) > _MAX_REPORTED:
            lines.append(f"  ... {len(found) - _MAX_REPORTED} more")
        raise AssertionError(
            f"JSON documents differ ({len(found)} difference(s)):\n" + "\n".join(lines)
        )

    return _assert
