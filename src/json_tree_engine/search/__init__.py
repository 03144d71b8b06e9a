"""Search subpackage: public API for tree search, highlighting and filtering."""

from __future__ import annotations

from json_tree_engine.search.engine import SearchEngine
from json_tree_engine.search.options import SearchOptions
from json_tree_engine.search.result import SearchResult

__all__ = ["SearchEngine", "SearchOptions", "SearchResult"]
