"""Card entity representing a Leitner flashcard."""

from dataclasses import dataclass, field, replace
from typing import Any, Self, TypedDict


class CardDict(TypedDict, total=False):
    """Card data structure for serialization.

    Only ``id`` and ``boxNumber`` are interpreted; any other key is carried
    through import/export untouched.
    """

    id: str
    boxNumber: int


RESERVED_KEYS = frozenset(CardDict.__annotations__)


@dataclass(frozen=True)
class Card:
    """Leitner card entity.

    Attributes:
        id: Unique card identifier (registry key)
        box_number: Leitner box the card currently sits in (0 = most frequent review)
        extra: Opaque fields (content, metadata) preserved verbatim
    """

    id: str
    box_number: int = 0
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        reserved = RESERVED_KEYS & self.extra.keys()
        if reserved:
            raise ValueError(f"extra must not contain interpreted keys: {sorted(reserved)}")

    def with_box(self, box_number: int) -> Self:
        """Return a copy sitting in another box, all other fields unchanged."""
        return replace(self, box_number=box_number)

    def to_dict(self) -> CardDict:
        """Convert card to its wire mapping for export."""
        return {"id": self.id, "boxNumber": self.box_number, **self.extra}
