"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    SessionLedgerDep,
    cleanup_dependencies,
    drain_diagnostics,
    get_session_ledger,
    init_dependencies,
)
from .routes import cards_router, session_router

__all__ = [
    # Routes
    "session_router",
    "cards_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_session_ledger",
    "drain_diagnostics",
    # Type aliases
    "SessionLedgerDep",
]
