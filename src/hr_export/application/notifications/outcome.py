"""Application notifications – tri-state ExportOutcome."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExportOutcome", "Failure", "Pending", "Success"]


@dataclass(frozen=True)
class Pending:
    """The operation has started and has not settled yet."""

    message: str

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Success:
    """The operation settled successfully."""

    message: str

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The operation settled with an error; ``reason`` is user-facing."""

    reason: str

    @property
    def is_terminal(self) -> bool:
        return True


type ExportOutcome = Pending | Success | Failure
