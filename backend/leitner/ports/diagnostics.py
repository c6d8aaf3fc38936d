"""Port interface for ledger diagnostics."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Port for observability events emitted by the session ledger.

    Keeps the domain independent of any particular logging mechanism.
    None of these events is an error for the caller; they are reported
    and the ledger carries on.
    """

    def import_failed(self, error: Exception) -> None:
        """Import payload could not be parsed; registry left untouched.

        Args:
            error: The parse/validation error
        """
        ...

    def card_not_found(self, card_id: str, new_box_id: int) -> None:
        """Buffered answer references a card missing from the registry.

        Args:
            card_id: Identifier from the answer record
            new_box_id: Box the answer asked for
        """
        ...

    def card_unchanged(self, card_id: str, box_number: int) -> None:
        """Buffered answer targets the box the card already sits in.

        Args:
            card_id: Card identifier
            box_number: Current (and requested) box
        """
        ...
