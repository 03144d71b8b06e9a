"""RegexStrategy: user-supplied regular expressions with validation.

Patterns come straight from a search box, so they are frequently incomplete
while the user is typing.  ``validate_regex`` lets the caller surface the
parse error; ``matches`` and ``get_match_positions`` never raise on a bad
pattern and simply report no match.
"""

from __future__ import annotations

from json_tree_engine.cache import PatternCache
from json_tree_engine.protocols import MatchSpan

__all__ = ["RegexStrategy", "validate_regex"]

# Shared by validate_regex only; strategies own their caches.
_validation_cache = PatternCache(max_size=32)


def validate_regex(pattern: str, case_sensitive: bool = False) -> str | None:
    """Return the compile error message for ``pattern``, or None if valid.

    Args:
        pattern: User-supplied regular expression source.
        case_sensitive: Compile flag; included because it is part of the
            cache key and some constructs only fail under specific flags.

    Returns:
        ``None`` for a valid (or empty) pattern, otherwise a human-readable
        error string suitable for display.
    """
    if not pattern:
        return None
    _, error = _validation_cache.compile(pattern, case_sensitive)
    return error


class RegexStrategy:
    """Regular-expression matching strategy.

    Satisfies the ``MatchStrategy`` Protocol structurally.  Compiled patterns
    are kept in a per-instance ``PatternCache``.

    Args:
        case_sensitive: When False (default) patterns compile with IGNORECASE.
        max_cache_size: Capacity of the compiled-pattern LRU cache.
    """

    name = "regex"

    def __init__(self, case_sensitive: bool = False, max_cache_size: int = 128) -> None:
        self.case_sensitive = case_sensitive
        self._patterns = PatternCache(max_size=max_cache_size)

    def validate(self, pattern: str) -> str | None:
        """Return the compile error for ``pattern`` under this strategy's flags."""
        if not pattern:
            return None
        _, error = self._patterns.compile(pattern, self.case_sensitive)
        return error

    def matches(self, pattern: str, target: str) -> bool:
        if not pattern:
            return True
        if not target:
            return False
        compiled, _ = self._patterns.compile(pattern, self.case_sensitive)
        if compiled is None:
            return False
        return compiled.search(target) is not None

    def get_match_positions(self, pattern: str, target: str) -> list[MatchSpan]:
        """Return the span of every non-overlapping match.

        ``finditer`` steps past zero-length matches on its own, so patterns
        like ``a*`` terminate; the empty spans they produce carry nothing to
        highlight and are dropped.
        """
        if not pattern or not target:
            return []
        compiled, _ = self._patterns.compile(pattern, self.case_sensitive)
        if compiled is None:
            return []
        return [m.span() for m in compiled.finditer(target) if m.end() > m.start()]
