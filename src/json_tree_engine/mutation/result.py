"""MutationResult dataclass and MutationError StrEnum.

Mutations report failure as data, never as exceptions: the caller checks
``success`` and shows ``error`` to the user verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["MutationError", "MutationResult"]


class MutationError(StrEnum):
    """Failure categories of a mutation.

    - INVALID_PATH      -> "invalid_path"      : navigation failed (missing key,
                                                 bad/out-of-range index, or a
                                                 primitive where a container
                                                 was required)
    - INVALID_OPERATION -> "invalid_operation" : structurally disallowed request
                                                 (empty path, deleting from a
                                                 primitive)
    """

    INVALID_PATH = auto()
    INVALID_OPERATION = auto()


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of an update or delete.

    Attributes:
        success: True if the operation was applied.
        data: The full new root on success; ``None`` on failure.
        error: Human-readable failure message; ``None`` on success.
        error_kind: Failure category; ``None`` on success.
    """

    success: bool
    data: Any = None
    error: str | None = None
    error_kind: MutationError | None = None

    @classmethod
    def ok(cls, data: Any) -> MutationResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: MutationError, message: str) -> MutationResult:
        return cls(success=False, data=None, error=message, error_kind=kind)
