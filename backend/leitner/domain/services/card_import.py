"""
Card Import.

Parses the flat JSON array exchanged with the UI into Card entities.
Validation is all-or-nothing: one malformed element rejects the payload.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

from leitner.domain.entities.card import Card


class ImportParseError(ValueError):
    """Raised when an import payload is not a valid JSON array of cards."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class CardPayload(BaseModel):
    """Wire shape of one card.

    ``id`` and ``boxNumber`` are required and strictly typed; every other
    key is allowed and kept as-is in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    box_number: StrictInt = Field(alias="boxNumber")

    def to_card(self) -> Card:
        """Convert validated payload to a Card entity."""
        return Card(id=self.id, box_number=self.box_number, extra=dict(self.model_extra or {}))


_CARD_LIST = TypeAdapter(list[CardPayload])


def _summarize(exc: ValidationError) -> str:
    """One-line description of the first validation problem."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "payload"
    return f"{location}: {first['msg']}"


def parse_cards(payload: str | bytes) -> list[Card]:
    """Parse a JSON array of cards.

    Args:
        payload: JSON text, expected to be an array of card objects

    Returns:
        Cards in payload order (duplicates are kept; the registry collapses them)

    Raises:
        ImportParseError: Malformed JSON, non-array payload, or an element
            without a string ``id`` / integer ``boxNumber``
    """
    try:
        items = _CARD_LIST.validate_json(payload)
    except ValidationError as e:
        raise ImportParseError(
            f"Invalid card payload ({_summarize(e)})",
            errors=e.errors(include_url=False),
        ) from e
    return [item.to_card() for item in items]
