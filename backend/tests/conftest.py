"""Shared test fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from leitner.domain.entities.card import Card
from leitner.domain.services.session_ledger import SessionLedger
from leitner.infrastructure.diagnostics import RecordingDiagnostics


@pytest.fixture
def diagnostics():
    """In-memory diagnostics sink that does not log."""
    return RecordingDiagnostics(forward=None)


@pytest.fixture
def ledger(diagnostics):
    """Empty ledger wired to the recording sink."""
    return SessionLedger(diagnostics=diagnostics)


@pytest.fixture
def sample_cards():
    """Three cards with opaque content fields."""
    return [
        Card(id="c1", box_number=1, extra={"front": "bonjour", "back": "hello"}),
        Card(id="c2", box_number=0, extra={"front": "merci", "back": "thanks", "tags": ["fr"]}),
        Card(id="c3", box_number=3, extra={"front": "chat", "back": "cat", "meta": {"deck": "A"}}),
    ]


@pytest.fixture
def loaded_ledger(ledger, sample_cards):
    """Ledger holding the sample cards."""
    for card in sample_cards:
        ledger.add_card(card)
    return ledger


@pytest.fixture
def seed_file(tmp_path):
    """JSON card file usable as LEDGER_SEED_PATH."""
    path = tmp_path / "cards.json"
    path.write_text(
        json.dumps(
            [
                {"id": "s1", "boxNumber": 0, "front": "uno"},
                {"id": "s2", "boxNumber": 2, "front": "dos"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def client(monkeypatch, seed_file):
    """TestClient running the app lifespan with a seeded ledger."""
    monkeypatch.setenv("LEDGER_SEED_PATH", str(seed_file))
    monkeypatch.setenv("LEITNER_MAX_BOX", "3")

    from leitner.app import app

    with TestClient(app) as test_client:
        yield test_client
