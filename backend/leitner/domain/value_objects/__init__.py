"""Domain value objects - immutable objects without identity."""

from .answer_record import AnswerRecord
from .box_stats import BoxStats
from .commit_outcome import CommitOutcome, CommitSummary

__all__ = [
    "AnswerRecord",
    "BoxStats",
    "CommitOutcome",
    "CommitSummary",
]
