"""
Composition Root.

Centralized dependency wiring for the application.
Factory functions that pick concrete diagnostics sinks belong here so the
domain only ever sees the DiagnosticsSink port.
"""

import logging
from pathlib import Path

from leitner.domain.services.session_ledger import SessionLedger
from leitner.infrastructure.diagnostics import LoggingDiagnostics, RecordingDiagnostics

logger = logging.getLogger(__name__)


def create_session_ledger(record_diagnostics: bool = True) -> SessionLedger:
    """Create a SessionLedger wired to a diagnostics sink.

    Args:
        record_diagnostics: Keep events in memory (and log them) so the API
            can report what a commit skipped. False logs only.

    Returns:
        Empty SessionLedger
    """
    diagnostics = RecordingDiagnostics() if record_diagnostics else LoggingDiagnostics()
    return SessionLedger(diagnostics=diagnostics)


def seed_ledger(ledger: SessionLedger, seed_path: Path) -> bool:
    """Import a card file into the ledger.

    Args:
        ledger: Ledger to populate
        seed_path: JSON file holding a card array

    Returns:
        True if the file was read and imported, False otherwise
    """
    try:
        payload = seed_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Cannot read seed file {seed_path}: {e}")
        return False

    if not ledger.import_file(payload):
        logger.warning(f"Seed file {seed_path} rejected, ledger left empty")
        return False

    logger.info(f"Seeded ledger with {len(ledger)} card(s) from {seed_path}")
    return True
