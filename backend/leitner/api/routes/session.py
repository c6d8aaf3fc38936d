"""Review session API routes."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from leitner.api.dependencies import SessionLedgerDep, drain_diagnostics
from leitner.api.routes.cards import ErrorResponse
from leitner.config import get_max_box
from leitner.domain.services.box_policy import next_box

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/session", tags=["session"])


# =============================================================================
# Request/Response Models
# =============================================================================


class AnswerRequest(BaseModel):
    """Request body for buffering an answer with an explicit target box."""

    card_id: str
    new_box_id: int


class GradeRequest(BaseModel):
    """Request body for buffering a right/wrong answer."""

    card_id: str
    correct: bool


class PendingAnswer(BaseModel):
    """Buffered answer in API response."""

    card_id: str
    new_box_id: int


class SessionStatusResponse(BaseModel):
    """Session flag and buffer size."""

    in_session: bool
    pending_count: int


class GradeResponse(SessionStatusResponse):
    """Response for a graded answer."""

    card_id: str
    new_box_id: int


class CurrentSessionResponse(SessionStatusResponse):
    """Response for current session, including buffered answers."""

    pending_answers: list[PendingAnswer]


class DiagnosticInfo(BaseModel):
    """Answer skipped during commit."""

    kind: str
    card_id: str | None = None
    box: int | None = None
    message: str


class EndSessionResponse(BaseModel):
    """Response for session end."""

    in_session: bool
    applied: int
    unchanged: int
    missing: int
    total: int
    diagnostics: list[DiagnosticInfo]


# =============================================================================
# Routes
# =============================================================================


@router.post("/start", response_model=SessionStatusResponse)
async def start_session(ledger: SessionLedgerDep) -> SessionStatusResponse:
    """Start a review session.

    Starting again mid-session discards answers that were not committed.
    """
    ledger.start_session()
    return SessionStatusResponse(in_session=ledger.in_session, pending_count=0)


@router.post("/answer", response_model=SessionStatusResponse)
async def answer_card(request: AnswerRequest, ledger: SessionLedgerDep) -> SessionStatusResponse:
    """Buffer an answer moving a card to ``new_box_id``.

    Nothing is checked here; unknown cards and same-box answers are
    reported when the session ends.
    """
    ledger.answer_card(request.card_id, request.new_box_id)
    return SessionStatusResponse(
        in_session=ledger.in_session,
        pending_count=len(ledger.pending_answers),
    )


@router.post(
    "/grade",
    response_model=GradeResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Card not found"},
    },
)
async def grade_card(request: GradeRequest, ledger: SessionLedgerDep) -> GradeResponse:
    """Buffer a right/wrong answer using the Leitner rule.

    Correct moves the card one box up (capped at LEITNER_MAX_BOX),
    incorrect sends it back to box 0. The starting box accounts for
    answers already buffered for the same card.
    """
    current_box = ledger.projected_box(request.card_id)
    if current_box is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "CARD_NOT_FOUND",
                    "message": f"Card {request.card_id} not found",
                }
            },
        )

    new_box_id = next_box(current_box, request.correct, max_box=get_max_box())
    ledger.answer_card(request.card_id, new_box_id)
    logger.debug(f"Graded card {request.card_id}: box {current_box} -> {new_box_id}")

    return GradeResponse(
        in_session=ledger.in_session,
        pending_count=len(ledger.pending_answers),
        card_id=request.card_id,
        new_box_id=new_box_id,
    )


@router.post("/end", response_model=EndSessionResponse)
async def end_session(ledger: SessionLedgerDep) -> EndSessionResponse:
    """Commit buffered answers and close the session.

    Returns how many answers moved a card and which ones were skipped.
    """
    drain_diagnostics(ledger)
    summary = ledger.end_session()
    events = drain_diagnostics(ledger)

    return EndSessionResponse(
        in_session=ledger.in_session,
        applied=summary.applied,
        unchanged=summary.unchanged,
        missing=summary.missing,
        total=summary.total,
        diagnostics=[
            DiagnosticInfo(kind=e.kind, card_id=e.card_id, box=e.box, message=e.message)
            for e in events
        ],
    )


@router.get("/current", response_model=CurrentSessionResponse)
async def get_current_session(ledger: SessionLedgerDep) -> CurrentSessionResponse:
    """Get the session flag and the answers buffered so far."""
    pending = ledger.pending_answers
    return CurrentSessionResponse(
        in_session=ledger.in_session,
        pending_count=len(pending),
        pending_answers=[
            PendingAnswer(card_id=record.card_id, new_box_id=record.new_box_id)
            for record in pending
        ],
    )
