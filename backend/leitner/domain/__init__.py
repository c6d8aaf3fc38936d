# Domain layer - Business logic (pydantic for payload validation only)

from .entities import Card
from .services import ImportParseError, SessionLedger, next_box
from .value_objects import (
    AnswerRecord,
    BoxStats,
    CommitOutcome,
    CommitSummary,
)

__all__ = [
    "AnswerRecord",
    "BoxStats",
    "Card",
    "CommitOutcome",
    "CommitSummary",
    "ImportParseError",
    "SessionLedger",
    "next_box",
]
