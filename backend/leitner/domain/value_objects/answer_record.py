"""Answer record value object for buffered session answers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnswerRecord:
    """Proposed box transition for one card, waiting for session commit.

    Attributes:
        card_id: Card the answer refers to (may not exist in the registry)
        new_box_id: Box the card should move to
    """

    card_id: str
    new_box_id: int
