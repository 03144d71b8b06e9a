"""SearchOptions: immutable configuration of one search request.

The UI rebuilds a ``SearchOptions`` whenever the search box or any toggle
changes and re-runs the search engine with it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

__all__ = ["SearchOptions"]


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Immutable search configuration.

    Attributes:
        search_text: Pattern typed by the user.  Empty disables searching:
            nothing highlights and everything stays visible.
        search_level: When set, only nodes at exactly this nesting depth are
            highlighted (root's direct children are level 1).  Filtering is
            not affected.
        filter_enabled: Hide branches with no matching descendant instead of
            merely leaving them unhighlighted.
        fuzzy_enabled: Use typo-tolerant matching.  Always case-insensitive.
        case_sensitive: Case-sensitive exact and regex matching.
        regex_enabled: Treat ``search_text`` as a regular expression.  Takes
            precedence over ``fuzzy_enabled`` when both are set.
        keys_only: Match object keys (and array indices) only, never values.
    """

    search_text: str = ""
    search_level: int | None = None
    filter_enabled: bool = False
    fuzzy_enabled: bool = False
    case_sensitive: bool = False
    regex_enabled: bool = False
    keys_only: bool = False

    def __post_init__(self) -> None:
        if self.search_level is not None and self.search_level < 0:
            msg = f"search_level must be >= 0, got {self.search_level}"
            raise ValueError(msg)

    @property
    def is_active(self) -> bool:
        """True when there is search text to match against."""
        return bool(self.search_text)

    def updated(self, **changes: Any) -> SearchOptions:
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)
