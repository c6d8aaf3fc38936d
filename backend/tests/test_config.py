"""Tests for leitner.config and the composition root."""

import pathlib

import pytest

from leitner.composition import create_session_ledger, seed_ledger
from leitner.config import (
    get_cors_allow_credentials,
    get_cors_origins,
    get_log_level,
    get_max_box,
    get_seed_path,
    is_production,
)
from leitner.infrastructure.diagnostics import LoggingDiagnostics, RecordingDiagnostics


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    origins = get_cors_origins()
    assert origins[0] == "http://localhost:3000"
    assert len(origins) == 6


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, ,https://b.example")
    assert get_cors_origins() == ["https://a.example", "https://b.example"]


def test_cors_allow_credentials(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "FALSE")
    assert get_cors_allow_credentials() is False


def test_is_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Production")
    assert is_production() is True
    monkeypatch.delenv("ENVIRONMENT")
    assert is_production() is False


def test_log_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == "INFO"
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_seed_path(monkeypatch):
    monkeypatch.delenv("LEDGER_SEED_PATH", raising=False)
    assert get_seed_path() is None
    monkeypatch.setenv("LEDGER_SEED_PATH", "/tmp/cards.json")
    assert get_seed_path() == pathlib.Path("/tmp/cards.json")


def test_max_box(monkeypatch):
    monkeypatch.delenv("LEITNER_MAX_BOX", raising=False)
    assert get_max_box() == 5
    monkeypatch.setenv("LEITNER_MAX_BOX", "7")
    assert get_max_box() == 7


@pytest.mark.parametrize("value", ["seven", "-1"])
def test_max_box_invalid(monkeypatch, value):
    monkeypatch.setenv("LEITNER_MAX_BOX", value)
    with pytest.raises(ValueError):
        get_max_box()


def test_create_session_ledger():
    assert isinstance(create_session_ledger().diagnostics, RecordingDiagnostics)
    assert isinstance(create_session_ledger(record_diagnostics=False).diagnostics, LoggingDiagnostics)


def test_seed_ledger(seed_file):
    ledger = create_session_ledger()
    assert seed_ledger(ledger, seed_file) is True
    assert [c.id for c in ledger.cards()] == ["s1", "s2"]


def test_seed_ledger_missing_file(tmp_path):
    ledger = create_session_ledger()
    assert seed_ledger(ledger, tmp_path / "missing.json") is False
    assert len(ledger) == 0


def test_seed_ledger_invalid_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    ledger = create_session_ledger()

    assert seed_ledger(ledger, path) is False
    assert len(ledger) == 0
