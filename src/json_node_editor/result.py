"""SaveOutcome dataclass and SaveStrategy StrEnum for save results.

This module provides the result type returned by ``SaveCoordinator.commit``
and ``NodeEditSession.save``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["SaveOutcome", "SaveStrategy"]


class SaveStrategy(StrEnum):
    """How an edited fragment was reconciled into the full document.

    - MERGE:   Draft object keys were copied onto the existing object in place.
    - REPLACE: The value at the path was replaced wholesale.
    """

    MERGE = auto()
    REPLACE = auto()


@dataclass(frozen=True, slots=True)
class SaveOutcome:
    """Result of a save attempt.

    Attributes:
        committed: True when a new full document was pushed to the store.
        strategy: Merge or replace, when the save got that far; else None.
        document_text: The committed full-document text on success.
        error: Why the attempt was skipped or failed; None on success.
    """

    committed: bool
    strategy: SaveStrategy | None = None
    document_text: str | None = None
    error: str | None = None

    @classmethod
    def skipped(cls, reason: str) -> SaveOutcome:
        return cls(committed=False, error=reason)
