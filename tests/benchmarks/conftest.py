"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Two tiers: ~100 leaves and ~2000 leaves, each with a near-identical
right-hand side (a handful of edits) so diffs exercise the full walk.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_document(sections: int, items_per_section: int) -> dict[str, Any]:
    """Build a nested document of ``sections`` objects holding arrays of records."""
    return {
        f"section_{s}": {
            "title": f"Section {s}",
            "enabled": s % 2 == 0,
            "items": [
                {"id": s * 1000 + i, "label": f"item-{s}-{i}", "email": f"user{i}@example.com"}
                for i in range(items_per_section)
            ],
        }
        for s in range(sections)
    }


def _edited(doc: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``doc`` with one change per section."""
    right: dict[str, Any] = {}
    for key, section in doc.items():
        items = [dict(item) for item in section["items"]]
        if items:
            items[-1]["label"] = "renamed"
        right[key] = {**section, "items": items}
    return right


@pytest.fixture(scope="session")
def pair_small() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_document(sections=5, items_per_section=6)
    return left, _edited(left)


@pytest.fixture(scope="session")
def pair_large() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_document(sections=20, items_per_section=33)
    return left, _edited(left)
