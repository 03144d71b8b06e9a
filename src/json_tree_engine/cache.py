"""PatternCache: LRU-backed cache of compiled user regular expressions.

Search runs on every (debounced) keystroke and evaluates the same pattern
against every key and value of a document, so compiling once per
``(pattern, case_sensitive)`` pair matters.  Compile failures are cached too:
an invalid pattern is reported with the same error message on every lookup
without recompiling.

Each ``PatternCache`` instance maintains its own ``LRUCache``: there is no
class-level shared state, so two separate instances never interfere with each
other.

Example::

    from json_tree_engine.cache import PatternCache

    cache = PatternCache(max_size=128)

    compiled, error = cache.compile("ema+il", case_sensitive=False)
    # compiled is a re.Pattern, error is None

    compiled, error = cache.compile("(unclosed", case_sensitive=False)
    # compiled is None, error is "missing ), unterminated subpattern at position 0"
"""

from __future__ import annotations

import re

from cachetools import LRUCache

__all__ = ["PatternCache"]

# Either a compiled pattern or the compile error message
_Entry = tuple[re.Pattern[str] | None, str | None]


class PatternCache:
    """LRU cache mapping ``(pattern, case_sensitive)`` to a compile outcome.

    LRU eviction is silent: the least-recently-used entry is dropped when
    ``max_size`` is exceeded.

    Args:
        max_size: Maximum number of compiled patterns to hold in memory.
            Defaults to 128.  Must be >= 1.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[tuple[str, bool], _Entry] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def compile(self, pattern: str, case_sensitive: bool) -> _Entry:
        """Return ``(compiled, None)`` or ``(None, error_message)``.

        Args:
            pattern: User-supplied regular expression source.
            case_sensitive: When False the pattern is compiled with
                ``re.IGNORECASE``.

        Returns:
            A 2-tuple; exactly one element is not None.
        """
        key = (pattern, case_sensitive)
        entry = self._cache.get(key)
        if entry is None:
            flags = 0 if case_sensitive else re.IGNORECASE
            try:
                entry = (re.compile(pattern, flags), None)
            except re.error as exc:
                entry = (None, str(exc))
            self._cache[key] = entry
        return entry

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
