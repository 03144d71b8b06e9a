"""Matching subpackage: interchangeable text-matching strategies.

Three strategies satisfy the ``MatchStrategy`` Protocol structurally:

- ``ExactStrategy`` : substring search, overlapping occurrences reported.
- ``RegexStrategy`` : user regular expressions, validated before use.
- ``FuzzyStrategy`` : edit-distance and subsequence matching.

``get_strategy`` selects one from the search toggles.  Regex takes precedence
over fuzzy when both toggles are on; exact is the default.
"""

from __future__ import annotations

from json_tree_engine.matching.exact import ExactStrategy, fold_case
from json_tree_engine.matching.fuzzy import FuzzyStrategy, levenshtein_distance
from json_tree_engine.matching.regex import RegexStrategy, validate_regex
from json_tree_engine.matching.spans import TextSegment, merge_spans, split_segments
from json_tree_engine.protocols import MatchStrategy

__all__ = [
    "ExactStrategy",
    "FuzzyStrategy",
    "RegexStrategy",
    "TextSegment",
    "fold_case",
    "get_strategy",
    "levenshtein_distance",
    "merge_spans",
    "split_segments",
    "validate_regex",
]


def get_strategy(
    fuzzy_enabled: bool = False,
    regex_enabled: bool = False,
    case_sensitive: bool = False,
) -> MatchStrategy:
    """Return a fresh strategy for the given search toggles.

    Args:
        fuzzy_enabled: Fuzzy toggle.
        regex_enabled: Regex toggle; wins when both toggles are on.
        case_sensitive: Forwarded to exact and regex strategies.  Fuzzy
            matching ignores it.

    Returns:
        A ``MatchStrategy`` implementation.
    """
    if regex_enabled:
        return RegexStrategy(case_sensitive=case_sensitive)
    if fuzzy_enabled:
        return FuzzyStrategy()
    return ExactStrategy(case_sensitive=case_sensitive)
