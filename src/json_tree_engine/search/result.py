"""SearchResult dataclass summarising the matches at a single tree node."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["SearchResult"]


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Per-node search summary returned by ``SearchEngine.search_node``.

    Attributes:
        matches: True if the node has a direct match (an immediate key or
            immediate primitive value, or its own value for a primitive).
        has_matching_descendants: True if a nested container somewhere below
            the node has a match.
        matched_keys: Immediate keys that matched, in document order.
        matched_values: String forms of immediate primitive values that
            matched, in document order.
    """

    matches: bool
    has_matching_descendants: bool
    matched_keys: list[str] = field(default_factory=list)
    matched_values: list[str] = field(default_factory=list)
