"""Top-level package for the cardkit card-collection rule engine."""

from . import cards, cribbage, deck, errors, hands, ranks, sequences

__all__ = [
    "cards",
    "cribbage",
    "deck",
    "errors",
    "hands",
    "ranks",
    "sequences",
]
