"""Diagnostics sinks backed by stdlib logging or in-memory recording."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class LoggingDiagnostics:
    """DiagnosticsSink that writes ledger events to a logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def import_failed(self, error: Exception) -> None:
        self._logger.error(f"Invalid JSON: {error}")

    def card_not_found(self, card_id: str, new_box_id: int) -> None:
        self._logger.error(f"Card {card_id} not found in registry (requested box {new_box_id})")

    def card_unchanged(self, card_id: str, box_number: int) -> None:
        self._logger.info(f"Card {card_id} remains in the same box ({box_number})")


@dataclass
class DiagnosticEvent:
    """One recorded diagnostic.

    Attributes:
        kind: Event name (``import_failed``, ``card_not_found``, ``card_unchanged``)
        card_id: Card concerned, None for import failures
        box: Box number involved, None for import failures
        message: Human-readable description
    """

    kind: str
    card_id: str | None = None
    box: int | None = None
    message: str = ""


@dataclass
class RecordingDiagnostics:
    """DiagnosticsSink that keeps events in memory and forwards them.

    Used by the HTTP layer to report what a commit skipped, and by tests.
    Events are also passed to ``forward`` (logging by default) so nothing
    disappears from the application log.
    """

    events: list[DiagnosticEvent] = field(default_factory=list)
    forward: LoggingDiagnostics | None = field(default_factory=LoggingDiagnostics)

    def import_failed(self, error: Exception) -> None:
        self.events.append(DiagnosticEvent(kind="import_failed", message=str(error)))
        if self.forward:
            self.forward.import_failed(error)

    def card_not_found(self, card_id: str, new_box_id: int) -> None:
        self.events.append(
            DiagnosticEvent(
                kind="card_not_found",
                card_id=card_id,
                box=new_box_id,
                message=f"Card {card_id} not found",
            )
        )
        if self.forward:
            self.forward.card_not_found(card_id, new_box_id)

    def card_unchanged(self, card_id: str, box_number: int) -> None:
        self.events.append(
            DiagnosticEvent(
                kind="card_unchanged",
                card_id=card_id,
                box=box_number,
                message=f"Card {card_id} remains in the same box ({box_number})",
            )
        )
        if self.forward:
            self.forward.card_unchanged(card_id, box_number)

    def drain(self) -> list[DiagnosticEvent]:
        """Return recorded events and start a fresh list."""
        events, self.events = self.events, []
        return events

    def kinds(self) -> list[str]:
        """Event names in the order they were recorded."""
        return [e.kind for e in self.events]
