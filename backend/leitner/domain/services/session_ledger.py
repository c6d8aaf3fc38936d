"""Session ledger: card registry plus buffered answers committed at session end."""

import json
import logging

from leitner.domain.entities.card import Card
from leitner.domain.services.card_import import ImportParseError, parse_cards
from leitner.domain.value_objects.answer_record import AnswerRecord
from leitner.domain.value_objects.box_stats import BoxStats
from leitner.domain.value_objects.commit_outcome import CommitOutcome, CommitSummary
from leitner.infrastructure.diagnostics import LoggingDiagnostics
from leitner.ports.diagnostics import DiagnosticsSink

logger = logging.getLogger(__name__)

EXPORT_INDENT = 4


class SessionLedger:
    """Owns the card registry and the pending-answer buffer.

    Lifecycle:
        import_file / add_card -> start_session -> answer_card* -> end_session

    Answers are only buffered during a session; ``end_session`` is the
    single place where a card's box number changes. Callers are trusted to
    sequence calls: nothing here rejects ``answer_card`` outside a session
    or a repeated ``start_session`` (which discards the buffer).

    Not thread-safe. One ledger is expected to be driven by one control thread.
    """

    def __init__(self, diagnostics: DiagnosticsSink | None = None):
        """Initialize an empty ledger.

        Args:
            diagnostics: Sink for import failures and skipped answers.
                Defaults to logging.
        """
        self._diagnostics: DiagnosticsSink = diagnostics or LoggingDiagnostics()
        self._cards: dict[str, Card] = {}
        self._pending: list[AnswerRecord] = []
        self._in_session = False

    # =========================================================================
    # Registry
    # =========================================================================

    @property
    def diagnostics(self) -> DiagnosticsSink:
        return self._diagnostics

    @property
    def in_session(self) -> bool:
        """Whether a session is open (answers are being buffered)."""
        return self._in_session

    @property
    def pending_answers(self) -> tuple[AnswerRecord, ...]:
        """Buffered answers in submission order (read-only copy)."""
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def get_card(self, card_id: str) -> Card | None:
        return self._cards.get(card_id)

    def cards(self) -> list[Card]:
        """All cards in registry order."""
        return list(self._cards.values())

    def box_counts(self) -> list[BoxStats]:
        """Number of cards per occupied box, in ascending box order."""
        counts: dict[int, int] = {}
        for card in self._cards.values():
            counts[card.box_number] = counts.get(card.box_number, 0) + 1
        return [BoxStats(box=box, count=counts[box]) for box in sorted(counts)]

    def import_file(self, payload: str | bytes) -> bool:
        """Replace the registry with cards parsed from a JSON array.

        Args:
            payload: JSON array of card objects

        Returns:
            True if the registry was replaced, False if the payload was
            rejected (registry left unchanged)
        """
        try:
            imported = parse_cards(payload)
        except ImportParseError as e:
            self._diagnostics.import_failed(e)
            return False

        self._cards.clear()
        for card in imported:
            self._cards[card.id] = card

        logger.debug(f"Imported {len(imported)} card(s), registry holds {len(self._cards)}")
        return True

    def export_data(self) -> str:
        """Serialize all cards as a pretty-printed JSON array.

        Re-importing the result reconstructs an equivalent registry.
        """
        return json.dumps(
            [card.to_dict() for card in self._cards.values()],
            indent=EXPORT_INDENT,
            ensure_ascii=False,
        )

    def add_card(self, card: Card) -> None:
        """Insert or overwrite the registry entry for ``card.id``."""
        self._cards[card.id] = card

    # =========================================================================
    # Session
    # =========================================================================

    def start_session(self) -> None:
        """Open a session with an empty buffer.

        Calling this mid-session discards answers not yet committed.
        """
        if self._pending:
            logger.debug(f"Discarding {len(self._pending)} uncommitted answer(s)")
        self._pending = []
        self._in_session = True

    def projected_box(self, card_id: str) -> int | None:
        """Box a card will sit in once the current buffer is committed.

        Applying a card's records in order leaves it in the box named by the
        last one, so that record wins over the registry value.

        Returns:
            Projected box number, or None if the card is not in the registry
        """
        card = self._cards.get(card_id)
        if card is None:
            return None
        for record in reversed(self._pending):
            if record.card_id == card_id:
                return record.new_box_id
        return card.box_number

    def answer_card(self, card_id: str, new_box_id: int) -> None:
        """Buffer a proposed box transition.

        Validation is deferred to ``end_session``: unknown cards and
        same-box answers are only detected at commit time.
        """
        self._pending.append(AnswerRecord(card_id=card_id, new_box_id=new_box_id))

    def end_session(self) -> CommitSummary:
        """Commit buffered answers to the registry and close the session.

        Records are applied in submission order against the live registry,
        so a later answer for the same card sees the earlier one's result.
        Skipped records are reported to diagnostics; nothing is raised.

        Returns:
            CommitSummary with applied/unchanged/missing counts
        """
        counts = {outcome: 0 for outcome in CommitOutcome}
        for record in self._pending:
            counts[self._apply(record)] += 1

        self._pending = []
        self._in_session = False

        summary = CommitSummary(
            applied=counts[CommitOutcome.APPLIED],
            unchanged=counts[CommitOutcome.UNCHANGED],
            missing=counts[CommitOutcome.CARD_NOT_FOUND],
        )
        logger.info(
            f"Session committed: {summary.applied} moved, "
            f"{summary.unchanged} unchanged, {summary.missing} missing"
        )
        return summary

    def _apply(self, record: AnswerRecord) -> CommitOutcome:
        """Apply one answer record to the registry."""
        card = self._cards.get(record.card_id)
        if card is None:
            self._diagnostics.card_not_found(record.card_id, record.new_box_id)
            return CommitOutcome.CARD_NOT_FOUND

        if card.box_number == record.new_box_id:
            self._diagnostics.card_unchanged(record.card_id, record.new_box_id)
            return CommitOutcome.UNCHANGED

        self._cards[record.card_id] = card.with_box(record.new_box_id)
        return CommitOutcome.APPLIED
