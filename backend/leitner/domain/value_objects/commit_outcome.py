"""Commit outcome value objects for session end."""

from dataclasses import dataclass
from enum import StrEnum


class CommitOutcome(StrEnum):
    """What happened to one buffered answer when the session was committed.

    States:
        APPLIED: Card moved to the new box
        UNCHANGED: Card was already in the target box (no-op)
        CARD_NOT_FOUND: Card absent from the registry (dangling answer)
    """

    APPLIED = "applied"
    UNCHANGED = "unchanged"
    CARD_NOT_FOUND = "card_not_found"

    def is_skip(self) -> bool:
        """Check if the answer left the registry untouched."""
        return self is not CommitOutcome.APPLIED


@dataclass(frozen=True)
class CommitSummary:
    """Counts of commit outcomes for one session."""

    applied: int = 0
    unchanged: int = 0
    missing: int = 0

    @property
    def total(self) -> int:
        """Number of answers processed."""
        return self.applied + self.unchanged + self.missing

    @property
    def skipped(self) -> int:
        """Answers that did not change the registry."""
        return self.unchanged + self.missing

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "applied": self.applied,
            "unchanged": self.unchanged,
            "missing": self.missing,
            "total": self.total,
        }
