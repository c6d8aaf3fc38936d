"""Domain services - orchestration and business logic."""

from .box_policy import next_box
from .card_import import CardPayload, ImportParseError, parse_cards
from .session_ledger import SessionLedger

__all__ = [
    "SessionLedger",
    "CardPayload",
    "ImportParseError",
    "parse_cards",
    "next_box",
]
