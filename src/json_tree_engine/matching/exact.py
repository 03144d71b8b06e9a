"""ExactStrategy: substring matching, case-insensitive by default."""

from __future__ import annotations

from json_tree_engine.protocols import MatchSpan

__all__ = ["ExactStrategy", "fold_case"]


def fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, keeping its length.

    A few characters lowercase to more than one code point (``"İ"`` becomes
    two).  Those are kept as-is so every index into the folded string is
    also an index into ``text`` and match spans stay valid for the original.
    """
    folded: list[str] = []
    for ch in text:
        lower = ch.lower()
        folded.append(lower if len(lower) == 1 else ch)
    return "".join(folded)


class ExactStrategy:
    """Substring matching strategy.

    Satisfies the ``MatchStrategy`` Protocol structurally.  Case folding is
    decided by whoever constructs the strategy (the search engine passes its
    ``case_sensitive`` option through); the strategy itself never guesses.

    Example::

        strategy = ExactStrategy()
        strategy.matches("mail", "Email")               # True
        strategy.get_match_positions("aa", "aaaa")      # [(0, 2), (1, 3), (2, 4)]
    """

    name = "exact"

    def __init__(self, case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive

    def _fold(self, text: str) -> str:
        return text if self.case_sensitive else fold_case(text)

    def matches(self, pattern: str, target: str) -> bool:
        """Return True if ``pattern`` occurs anywhere in ``target``."""
        if not pattern:
            return True
        if not target:
            return False
        return self._fold(pattern) in self._fold(target)

    def get_match_positions(self, pattern: str, target: str) -> list[MatchSpan]:
        """Return every occurrence of ``pattern`` in ``target``.

        Scanning restarts one character after each hit, so overlapping
        occurrences are all reported.

        Args:
            pattern: Substring to look for.
            target: String to search in.

        Returns:
            Spans ordered by start; empty for an empty pattern or target.
        """
        if not pattern or not target:
            return []

        needle = self._fold(pattern)
        haystack = self._fold(target)
        positions: list[MatchSpan] = []

        start = 0
        while start < len(haystack):
            found = haystack.find(needle, start)
            if found == -1:
                break
            positions.append((found, found + len(needle)))
            start = found + 1
        return positions
