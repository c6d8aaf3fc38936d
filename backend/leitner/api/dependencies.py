"""FastAPI dependency injection module.

Provides the singleton session ledger for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends

from leitner.composition import create_session_ledger, seed_ledger
from leitner.config import get_seed_path
from leitner.domain.services.session_ledger import SessionLedger
from leitner.infrastructure.diagnostics import DiagnosticEvent, RecordingDiagnostics

logger = logging.getLogger(__name__)


# Singleton stored at module level
_session_ledger: SessionLedger | None = None


async def init_dependencies() -> None:
    """Initialize all singleton dependencies.

    Called during FastAPI lifespan startup.
    """
    global _session_ledger

    _session_ledger = create_session_ledger()

    seed_path = get_seed_path()
    if seed_path is not None:
        seed_ledger(_session_ledger, seed_path)
    else:
        logger.info("No LEDGER_SEED_PATH configured, starting with an empty ledger")


async def cleanup_dependencies() -> None:
    """Cleanup dependencies on shutdown.

    Called during FastAPI lifespan shutdown.
    Uncommitted answers are dropped; nothing outlives the process.
    """
    global _session_ledger

    if _session_ledger is not None and _session_ledger.in_session:
        pending = len(_session_ledger.pending_answers)
        logger.warning(f"Shutting down mid-session, discarding {pending} uncommitted answer(s)")

    _session_ledger = None


def get_session_ledger() -> SessionLedger:
    """Dependency: Get SessionLedger instance."""
    if _session_ledger is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _session_ledger


def drain_diagnostics(ledger: SessionLedger) -> list[DiagnosticEvent]:
    """Take recorded diagnostic events from the ledger's sink.

    Returns an empty list when the ledger only logs.
    """
    if isinstance(ledger.diagnostics, RecordingDiagnostics):
        return ledger.diagnostics.drain()
    return []


# Type aliases for dependency injection
SessionLedgerDep = Annotated[SessionLedger, Depends(get_session_ledger)]
