"""Domain entities - objects with identity."""

from .card import Card, CardDict

__all__ = ["Card", "CardDict"]
