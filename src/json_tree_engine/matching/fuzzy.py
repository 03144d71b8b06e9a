"""FuzzyStrategy: typo-tolerant matching via edit distance and subsequences.

Two techniques are combined and a match is accepted if either succeeds:

1. Edit distance: the pattern is compared against every substring of the
   target whose length lies within ``len(pattern) ± max_distance``, where
   ``max_distance = max(1, floor(len(pattern) * distance_threshold))``.
   This catches typos such as "emial" for "email".
2. Subsequence: the pattern characters appear in the target in order but
   not necessarily adjacent, e.g. "apl" in "apple".

Matching is always case-insensitive, whatever the caller's case-sensitivity
setting.  This is a documented limitation of fuzzy mode.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

from json_tree_engine.matching.exact import fold_case
from json_tree_engine.matching.spans import merge_consecutive
from json_tree_engine.protocols import MatchSpan

__all__ = ["DEFAULT_DISTANCE_THRESHOLD", "FuzzyStrategy", "levenshtein_distance"]

# Allow 2 edits for every 5 characters
DEFAULT_DISTANCE_THRESHOLD = 0.4


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Uses a rolling-row dynamic program with the shorter string on the row
    axis, so memory is O(min(n, m)).  Each row is computed with numpy: the
    substitution and deletion candidates are element-wise, and the insertion
    chain ``row[j] = min(row[j], row[j - 1] + 1)`` is resolved in one pass as
    ``minimum.accumulate(row - j) + j``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character insertions, deletions, or
        substitutions required to transform ``a`` into ``b``.
    """
    if a == b:
        return 0

    # Swap so that `b` is the shorter string (row allocation)
    if len(a) < len(b):
        a, b = b, a

    if len(b) == 0:
        return len(a)

    short = np.fromiter((ord(ch) for ch in b), dtype=np.int64, count=len(b))
    offsets = np.arange(len(b) + 1, dtype=np.int64)
    prev_row = offsets.copy()

    for i, ch_a in enumerate(a):
        row = np.empty_like(prev_row)
        row[0] = i + 1
        np.minimum(prev_row[:-1] + (short != ord(ch_a)), prev_row[1:] + 1, out=row[1:])
        prev_row = np.minimum.accumulate(row - offsets) + offsets

    return int(prev_row[-1])


class FuzzyStrategy:
    """Fuzzy matching strategy.

    Satisfies the ``MatchStrategy`` Protocol structurally.

    Example::

        strategy = FuzzyStrategy()
        strategy.matches("emial", "email")                # True  (edit distance)
        strategy.matches("apl", "apple")                  # True
        strategy.matches("zzz", "email")                  # False
        strategy.get_match_positions("emial", "email")    # [(0, 5)]

    Args:
        distance_threshold: Fraction of the pattern length tolerated as edits.
            Must be in [0, 1].  Defaults to 0.4.
    """

    name = "fuzzy"

    def __init__(self, distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD) -> None:
        if not 0.0 <= distance_threshold <= 1.0:
            msg = f"distance_threshold must be in [0, 1], got {distance_threshold}"
            raise ValueError(msg)
        self.distance_threshold = distance_threshold

    # ------------------------------------------------------------------
    # MatchStrategy Protocol surface
    # ------------------------------------------------------------------

    def matches(self, pattern: str, target: str) -> bool:
        if not pattern:
            return True
        if not target:
            return False

        pattern_lower = fold_case(pattern)
        target_lower = fold_case(target)

        if self._within_tolerance(pattern_lower, target_lower):
            return True
        return self._subsequence_positions(pattern_lower, target_lower) is not None

    def get_match_positions(self, pattern: str, target: str) -> list[MatchSpan]:
        """Return highlight spans, preferring the edit-distance match.

        Args:
            pattern: Search pattern.
            target: String to search in.

        Returns:
            A single span for the best edit-distance substring, otherwise the
            merged per-character spans of the subsequence match, otherwise [].
        """
        if not pattern or not target:
            return []

        pattern_lower = fold_case(pattern)
        target_lower = fold_case(target)

        span = self._levenshtein_span(pattern_lower, target_lower)
        if span is not None:
            return [span]

        positions = self._subsequence_positions(pattern_lower, target_lower)
        if positions is None:
            return []
        return merge_consecutive(positions)

    # ------------------------------------------------------------------
    # Edit distance
    # ------------------------------------------------------------------

    def max_distance(self, pattern: str) -> int:
        """Number of edits tolerated for ``pattern`` (never less than 1)."""
        return max(1, math.floor(len(pattern) * self.distance_threshold))

    def _candidate_spans(
        self, pattern: str, target: str, max_distance: int
    ) -> Iterator[MatchSpan]:
        """Yield the whole target, then every window the edit tolerance allows.

        Windows have lengths from ``len(pattern) - max_distance`` (at least 1)
        to ``len(pattern) + max_distance``, shortest first, each scanned left
        to right.  Nothing is yielded when the target is too short to match.
        """
        if len(target) < len(pattern) - max_distance:
            return

        yield (0, len(target))

        min_window = max(1, len(pattern) - max_distance)
        max_window = min(len(pattern) + max_distance, len(target))
        for length in range(min_window, max_window + 1):
            for start in range(len(target) - length + 1):
                yield (start, start + length)

    def _within_tolerance(self, pattern: str, target: str) -> bool:
        """True as soon as any candidate substring is within the edit tolerance."""
        max_distance = self.max_distance(pattern)
        return any(
            levenshtein_distance(pattern, target[start:end]) <= max_distance
            for start, end in self._candidate_spans(pattern, target, max_distance)
        )

    def _levenshtein_span(self, pattern: str, target: str) -> MatchSpan | None:
        """Find the best target substring within the edit tolerance.

        The whole target wins outright when it is within tolerance.
        Otherwise the first window with the lowest distance wins.
        """
        max_distance = self.max_distance(pattern)
        candidates = self._candidate_spans(pattern, target, max_distance)

        whole = next(candidates, None)
        if whole is None:
            return None
        if levenshtein_distance(pattern, target) <= max_distance:
            return whole

        best_span: MatchSpan | None = None
        best_distance = max_distance + 1
        for start, end in candidates:
            distance = levenshtein_distance(pattern, target[start:end])
            if distance < best_distance:
                best_distance = distance
                best_span = (start, end)
                if distance == 0:
                    return best_span

        return best_span

    # ------------------------------------------------------------------
    # Subsequence
    # ------------------------------------------------------------------

    @staticmethod
    def _subsequence_positions(pattern: str, target: str) -> list[MatchSpan] | None:
        """Greedy in-order character match; None unless the whole pattern is found."""
        positions: list[MatchSpan] = []
        p_idx = 0
        for t_idx, ch in enumerate(target):
            if p_idx == len(pattern):
                break
            if ch == pattern[p_idx]:
                positions.append((t_idx, t_idx + 1))
                p_idx += 1
        if p_idx != len(pattern):
            return None
        return positions
