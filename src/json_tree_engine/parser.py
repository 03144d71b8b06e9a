"""JSON text helpers: parse with readable errors, prettify, minify.

The engines operate on already-parsed values.  These helpers sit at the
boundary where the UI turns editor text into a value (and back), reporting
syntax errors as data with a snippet of the surrounding text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final

__all__ = [
    "INDENT_LEVELS",
    "ParseResult",
    "is_valid",
    "minify",
    "parse_json",
    "prettify",
    "stringify",
]

INDENT_LEVELS: Final = (2, 4, 6, 8)

# Characters of context shown on each side of a syntax error
_CONTEXT_RADIUS = 20


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of ``parse_json``.

    Attributes:
        success: True if the text parsed (blank text counts as success).
        data: Parsed value; ``None`` for blank text or on failure.
        error: Error message with a ``Near: "..."`` snippet; ``None`` on success.
    """

    success: bool
    data: Any = None
    error: str | None = None


def _error_context(text: str, position: int) -> str:
    start = max(0, position - _CONTEXT_RADIUS)
    end = min(len(text), position + _CONTEXT_RADIUS)
    snippet = text[start:end]
    return f"...{snippet}" if start > 0 else snippet


def parse_json(text: str) -> ParseResult:
    """Parse JSON text without raising.

    Args:
        text: Editor contents.

    Returns:
        ``ParseResult``; blank input yields ``success=True, data=None``.
    """
    if not text or not text.strip():
        return ParseResult(success=True)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        context = _error_context(text, exc.pos)
        message = f'{exc.msg} at line {exc.lineno} column {exc.colno}\nNear: "{context}"'
        return ParseResult(success=False, error=message)
    return ParseResult(success=True, data=data)


def is_valid(text: str) -> bool:
    return parse_json(text).success


def stringify(value: Any, indent: int | None = 2) -> str:
    """Serialise ``value`` keeping key order and non-ASCII characters."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def prettify(text: str, indent: int = 2) -> str:
    """Re-indent JSON text; invalid or null input is returned unchanged."""
    if indent not in INDENT_LEVELS:
        msg = f"indent must be one of {INDENT_LEVELS}, got {indent}"
        raise ValueError(msg)
    result = parse_json(text)
    if result.success and result.data is not None:
        return stringify(result.data, indent=indent)
    return text


def minify(text: str) -> str:
    """Strip insignificant whitespace; invalid or null input is returned unchanged."""
    result = parse_json(text)
    if result.success and result.data is not None:
        return json.dumps(result.data, separators=(",", ":"), ensure_ascii=False)
    return text
