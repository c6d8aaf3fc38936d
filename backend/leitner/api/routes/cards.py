"""Card registry API routes."""

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from leitner.api.dependencies import SessionLedgerDep, drain_diagnostics
from leitner.domain.services.card_import import CardPayload

router = APIRouter(prefix="/api/cards", tags=["cards"])


# =============================================================================
# Request/Response Models
# =============================================================================


class CardsResponse(BaseModel):
    """All cards in registry order, in their wire shape."""

    cards: list[dict[str, Any]]
    count: int


class BoxInfo(BaseModel):
    """Card count for one Leitner box."""

    box: int
    count: int


class BoxesResponse(BaseModel):
    """Response for box statistics."""

    boxes: list[BoxInfo]


class ImportResponse(BaseModel):
    """Response for a successful import."""

    success: bool
    card_count: int


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str
    details: dict | None = None


class ErrorResponse(BaseModel):
    """Error response wrapper."""

    error: ErrorDetail


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=CardsResponse)
async def list_cards(ledger: SessionLedgerDep) -> CardsResponse:
    """List every card in the registry."""
    cards = [card.to_dict() for card in ledger.cards()]
    return CardsResponse(cards=cards, count=len(cards))


@router.get("/boxes", response_model=BoxesResponse)
async def list_boxes(ledger: SessionLedgerDep) -> BoxesResponse:
    """Count cards per occupied box, lowest box first."""
    return BoxesResponse(
        boxes=[BoxInfo(box=stats.box, count=stats.count) for stats in ledger.box_counts()]
    )


@router.get("/export")
async def export_cards(ledger: SessionLedgerDep) -> Response:
    """Export the registry as a pretty-printed JSON array.

    The body can be posted back to ``/api/cards/import`` unchanged.
    """
    return Response(content=ledger.export_data(), media_type="application/json")


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Payload is not a valid card array"},
    },
)
async def import_cards(request: Request, ledger: SessionLedgerDep) -> ImportResponse:
    """Replace the registry with the JSON card array sent as the request body.

    On failure the registry is left exactly as it was.
    """
    payload = await request.body()
    drain_diagnostics(ledger)

    if not ledger.import_file(payload):
        events = drain_diagnostics(ledger)
        message = events[-1].message if events else "Invalid card payload"
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": {
                    "code": "IMPORT_INVALID",
                    "message": message,
                }
            },
        )

    return ImportResponse(success=True, card_count=len(ledger))


@router.post("", response_model=dict[str, Any], status_code=status.HTTP_201_CREATED)
async def add_card(card: CardPayload, ledger: SessionLedgerDep) -> dict[str, Any]:
    """Insert a card, or overwrite the card with the same id."""
    entity = card.to_card()
    ledger.add_card(entity)
    return entity.to_dict()


@router.get(
    "/{card_id:path}",
    response_model=dict[str, Any],
    responses={
        404: {"model": ErrorResponse, "description": "Card not found"},
    },
)
async def get_card(card_id: str, ledger: SessionLedgerDep) -> dict[str, Any]:
    """Get one card in its wire shape.

    Ids may contain slashes. The ids ``boxes`` and ``export`` resolve to the
    routes above and are only reachable through the card listing.
    """
    card = ledger.get_card(card_id)
    if card is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "CARD_NOT_FOUND",
                    "message": f"Card {card_id} not found",
                }
            },
        )
    return card.to_dict()
