"""SearchEngine: applies a match strategy across a JSON tree.

The engine answers the questions the tree renderer asks for every node on
every (debounced) keystroke:

- ``should_highlight``     : does this node itself match at this level?
- ``should_item_be_visible``: in filter mode, does this entry or anything
  below it match?
- ``get_match_positions``  : which characters of a label to emphasise?

Design:
- Strategy selection follows the toggles: regex, then fuzzy, then exact.
  An invalid regex never raises; the engine falls back to literal substring
  matching so the tree keeps responding while the user is mid-pattern.
- A match found only in a deeper descendant keeps a branch visible (and
  expanded) but does not highlight the branch itself.
- Array indices are treated as keys ("0", "1", ...) exactly like the path
  segments used by the mutation engine.
- The engine holds no per-search state.  Strategy instances are kept only so
  compiled regular expressions are reused across calls.
"""

from __future__ import annotations

import logging
from typing import Any

from json_tree_engine.matching.exact import ExactStrategy
from json_tree_engine.matching.fuzzy import FuzzyStrategy
from json_tree_engine.matching.regex import RegexStrategy
from json_tree_engine.matching.spans import TextSegment, split_segments
from json_tree_engine.protocols import MatchSpan, MatchStrategy
from json_tree_engine.search.options import SearchOptions
from json_tree_engine.search.result import SearchResult
from json_tree_engine.values import child_items, is_container, primitive_text

__all__ = ["SearchEngine"]

logger = logging.getLogger(__name__)


class SearchEngine:
    """Stateless search orchestrator over parsed JSON values.

    Example::

        from json_tree_engine.search import SearchEngine, SearchOptions

        engine = SearchEngine()
        doc = {"user": {"email": "a@b.c"}, "count": 3}
        opts = SearchOptions(search_text="emial", fuzzy_enabled=True, filter_enabled=True)

        engine.should_item_be_visible("user", doc["user"], opts)    # True
        engine.should_item_be_visible("count", doc["count"], opts)  # False
        engine.should_highlight(doc["user"], 1, opts)               # True
    """

    def __init__(self) -> None:
        self._exact = {cs: ExactStrategy(case_sensitive=cs) for cs in (False, True)}
        self._regex = {cs: RegexStrategy(case_sensitive=cs) for cs in (False, True)}
        self._fuzzy = FuzzyStrategy()

    # ------------------------------------------------------------------
    # Strategy selection
    # ------------------------------------------------------------------

    def strategy_for(
        self,
        search_text: str,
        fuzzy: bool = False,
        case_sensitive: bool = False,
        regex: bool = False,
    ) -> MatchStrategy:
        """Return the strategy that will evaluate ``search_text``.

        Regex wins over fuzzy.  A regex that fails to compile selects the
        literal (exact) strategy with the same case sensitivity.
        """
        if regex:
            strategy = self._regex[case_sensitive]
            error = strategy.validate(search_text)
            if error is None:
                return strategy
            logger.debug(
                "Invalid regex %r (%s); falling back to literal match", search_text, error
            )
            return self._exact[case_sensitive]
        if fuzzy:
            return self._fuzzy
        return self._exact[case_sensitive]

    def _strategy_from_options(self, options: SearchOptions) -> MatchStrategy:
        return self.strategy_for(
            options.search_text,
            fuzzy=options.fuzzy_enabled,
            case_sensitive=options.case_sensitive,
            regex=options.regex_enabled,
        )

    # ------------------------------------------------------------------
    # String-level matching
    # ------------------------------------------------------------------

    def matches(
        self,
        search_text: str,
        target: str,
        fuzzy: bool = False,
        case_sensitive: bool = False,
        regex: bool = False,
    ) -> bool:
        """Return True if ``target`` matches ``search_text`` under the toggles.

        Args:
            search_text: The search pattern.  Empty matches everything.
            target: The string to search in.  Empty never matches a
                non-empty pattern.
            fuzzy: Use fuzzy matching (case-insensitive regardless of
                ``case_sensitive``).
            case_sensitive: Case-sensitive exact/regex matching.
            regex: Interpret ``search_text`` as a regular expression.

        Returns:
            True on a match.  Never raises for malformed regular expressions.
        """
        if not search_text:
            return True
        if not target:
            return False
        strategy = self.strategy_for(search_text, fuzzy, case_sensitive, regex)
        return strategy.matches(search_text, target)

    def get_match_positions(
        self,
        search_text: str,
        target: str,
        fuzzy: bool = False,
        case_sensitive: bool = False,
        regex: bool = False,
    ) -> list[MatchSpan]:
        """Return highlight spans of ``search_text`` within ``target``."""
        if not search_text or not target:
            return []
        strategy = self.strategy_for(search_text, fuzzy, case_sensitive, regex)
        return strategy.get_match_positions(search_text, target)

    def highlight_segments(self, text: str, options: SearchOptions) -> list[TextSegment]:
        """Split ``text`` into plain/highlighted segments for display."""
        spans = self.get_match_positions(
            options.search_text,
            text,
            fuzzy=options.fuzzy_enabled,
            case_sensitive=options.case_sensitive,
            regex=options.regex_enabled,
        )
        return split_segments(text, spans)

    # ------------------------------------------------------------------
    # Tree queries
    # ------------------------------------------------------------------

    def deep_search(
        self,
        value: Any,
        search_text: str,
        fuzzy: bool = False,
        case_sensitive: bool = False,
        regex: bool = False,
        keys_only: bool = False,
    ) -> bool:
        """Return True if ``value`` or anything below it matches.

        For a primitive, its JSON text form is matched (unless ``keys_only``).
        For a container, any key, any primitive value (unless ``keys_only``),
        or any nested container match counts.

        Args:
            value: A JSON value.
            search_text: The search pattern.  Empty returns True.
            fuzzy, case_sensitive, regex: Matching toggles (see ``matches``).
            keys_only: Ignore values entirely.

        Returns:
            True if some part of the subtree matches.
        """
        if not search_text:
            return True
        strategy = self.strategy_for(search_text, fuzzy, case_sensitive, regex)
        return self._deep_match(value, search_text, strategy, keys_only)

    def _deep_match(
        self, value: Any, pattern: str, strategy: MatchStrategy, keys_only: bool
    ) -> bool:
        if not is_container(value):
            return not keys_only and strategy.matches(pattern, primitive_text(value))

        for key, child in child_items(value):
            if strategy.matches(pattern, key):
                return True
            if is_container(child):
                if self._deep_match(child, pattern, strategy, keys_only):
                    return True
            elif not keys_only and strategy.matches(pattern, primitive_text(child)):
                return True
        return False

    def search_node(self, value: Any, options: SearchOptions) -> SearchResult:
        """Summarise direct and descendant matches of a single node.

        Args:
            value: The JSON value at the node.
            options: Current search options.

        Returns:
            A ``SearchResult``; all-negative when the search text is empty.
        """
        if not options.is_active:
            return SearchResult(matches=False, has_matching_descendants=False)
        strategy = self._strategy_from_options(options)
        return self._search_node(value, options, strategy)

    def _search_node(
        self, value: Any, options: SearchOptions, strategy: MatchStrategy
    ) -> SearchResult:
        pattern = options.search_text
        matched_keys: list[str] = []
        matched_values: list[str] = []

        if not is_container(value):
            text = primitive_text(value)
            if not options.keys_only and strategy.matches(pattern, text):
                matched_values.append(text)
            return SearchResult(
                matches=bool(matched_values),
                has_matching_descendants=False,
                matched_keys=matched_keys,
                matched_values=matched_values,
            )

        has_matching_descendants = False
        for key, child in child_items(value):
            if strategy.matches(pattern, key):
                matched_keys.append(key)
            if is_container(child):
                child_result = self._search_node(child, options, strategy)
                if child_result.matches or child_result.has_matching_descendants:
                    has_matching_descendants = True
            elif not options.keys_only:
                text = primitive_text(child)
                if strategy.matches(pattern, text):
                    matched_values.append(text)

        return SearchResult(
            matches=bool(matched_keys or matched_values),
            has_matching_descendants=has_matching_descendants,
            matched_keys=matched_keys,
            matched_values=matched_values,
        )

    # ------------------------------------------------------------------
    # Rendering decisions
    # ------------------------------------------------------------------

    def should_highlight(self, value: Any, level: int, options: SearchOptions) -> bool:
        """Return True if the node at ``level`` has a direct match.

        A direct match is the node's own primitive value, or for containers
        one of its immediate keys or immediate primitive values.  Matches
        that exist only deeper in the subtree do not count.  When
        ``options.search_level`` is set, only nodes at exactly that level
        can highlight.
        """
        if not options.is_active:
            return False
        if options.search_level is not None and level != options.search_level:
            return False

        strategy = self._strategy_from_options(options)
        pattern = options.search_text

        if not is_container(value):
            return not options.keys_only and strategy.matches(
                pattern, primitive_text(value)
            )

        for key, child in child_items(value):
            if strategy.matches(pattern, key):
                return True
            if (
                not options.keys_only
                and not is_container(child)
                and strategy.matches(pattern, primitive_text(child))
            ):
                return True
        return False

    def should_be_visible(self, value: Any, options: SearchOptions) -> bool:
        """Return False only when filtering hides ``value`` entirely."""
        if not options.is_active or not options.filter_enabled:
            return True
        return self.deep_search(
            value,
            options.search_text,
            fuzzy=options.fuzzy_enabled,
            case_sensitive=options.case_sensitive,
            regex=options.regex_enabled,
            keys_only=options.keys_only,
        )

    def should_item_be_visible(self, key: str, value: Any, options: SearchOptions) -> bool:
        """Return True if the entry ``key: value`` survives filtering.

        With filtering disabled (or no search text) every entry is visible.
        Otherwise the entry is visible if its key matches or anything in its
        value matches, which keeps every ancestor of a match reachable.
        """
        if not options.is_active or not options.filter_enabled:
            return True
        strategy = self._strategy_from_options(options)
        if strategy.matches(options.search_text, key):
            return True
        return self._deep_match(value, options.search_text, strategy, options.keys_only)
