"""Match span helpers: merging and splitting text into highlight segments.

A span is a half-open ``(start, end)`` interval over a string's character
positions.  Strategies may report overlapping spans (the exact strategy
reports every overlapping occurrence) so the rendering layer merges them
first, then splits the text into alternating plain/highlighted segments.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from json_tree_engine.protocols import MatchSpan

__all__ = ["TextSegment", "merge_consecutive", "merge_spans", "split_segments"]


@dataclass(frozen=True, slots=True)
class TextSegment:
    """A contiguous slice of text and whether it should be highlighted."""

    text: str
    highlight: bool


def merge_consecutive(spans: list[MatchSpan]) -> list[MatchSpan]:
    """Merge spans whose end touches the next span's start.

    Input must already be ordered and non-overlapping, e.g. the per-character
    spans of a subsequence match: ``[(0, 1), (1, 2), (3, 4)] -> [(0, 2), (3, 4)]``.
    """
    if not spans:
        return []

    merged: list[MatchSpan] = []
    cur_start, cur_end = spans[0]
    for start, end in spans[1:]:
        if start == cur_end:
            cur_end = end
        else:
            merged.append((cur_start, cur_end))
            cur_start, cur_end = start, end
    merged.append((cur_start, cur_end))
    return merged


def merge_spans(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
    """Sort spans and merge every overlapping or adjacent pair.

    Args:
        spans: Spans from one or more match passes, in any order.

    Returns:
        Non-overlapping spans ordered by start.  Empty spans are dropped.
    """
    ordered = sorted(s for s in spans if s[1] > s[0])
    merged: list[MatchSpan] = []
    for start, end in ordered:
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def split_segments(text: str, spans: Iterable[MatchSpan]) -> list[TextSegment]:
    """Split ``text`` into plain and highlighted segments.

    Spans are merged before splitting and clipped to the text length.  The
    concatenation of all segment texts always equals ``text``.

    Args:
        text: The string being displayed.
        spans: Match spans produced by a strategy.

    Returns:
        A list of ``TextSegment``; a single plain segment when nothing matched.
    """
    merged = merge_spans(
        (max(0, start), min(len(text), end)) for start, end in spans
    )
    if not merged:
        return [TextSegment(text=text, highlight=False)]

    segments: list[TextSegment] = []
    last_end = 0
    for start, end in merged:
        if start > last_end:
            segments.append(TextSegment(text=text[last_end:start], highlight=False))
        segments.append(TextSegment(text=text[start:end], highlight=True))
        last_end = end
    if last_end < len(text):
        segments.append(TextSegment(text=text[last_end:], highlight=False))
    return segments
