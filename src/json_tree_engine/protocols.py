"""MatchStrategy Protocol for the json-tree-engine text matching extension point.

Defines the structural interface all match strategies must satisfy.  Users can
plug in custom strategies without inheriting from any base class: any class
with conformant ``name``, ``matches`` and ``get_match_positions`` members
passes ``isinstance`` checks.

Example::

    from json_tree_engine.protocols import MatchStrategy

    class PrefixStrategy:
        name = "prefix"

        def matches(self, pattern: str, target: str) -> bool:
            return target.startswith(pattern)

        def get_match_positions(self, pattern: str, target: str) -> list[tuple[int, int]]:
            return [(0, len(pattern))] if self.matches(pattern, target) else []

    assert isinstance(PrefixStrategy(), MatchStrategy)  # True: structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Half-open [start, end) character interval
MatchSpan = tuple[int, int]


@runtime_checkable
class MatchStrategy(Protocol):
    """Structural protocol for text matching strategies.

    Contract shared by every implementation:
    - An empty ``pattern`` matches everything and yields no spans.
    - ``get_match_positions`` returns spans ordered by ``start``.
    """

    name: str

    def matches(self, pattern: str, target: str) -> bool: ...

    def get_match_positions(self, pattern: str, target: str) -> list[MatchSpan]: ...
