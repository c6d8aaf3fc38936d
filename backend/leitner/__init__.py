"""Leitner session ledger - in-memory box bookkeeping for flashcard review."""

__version__ = "0.1.0"
