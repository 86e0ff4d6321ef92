"""Failure taxonomy raised by the card-collection rule engine."""

from __future__ import annotations

__all__ = [
    "CardError",
    "InvalidRange",
    "InsufficientElements",
    "ExcessiveElements",
    "IsFull",
    "IsEmpty",
    "NotFound",
    "InvalidDuplicateCount",
    "FeatureNotAllowed",
]


class CardError(RuntimeError):
    """Base class for every rule violation reported by ``cardkit``."""


class InvalidRange(CardError):
    """Raised when a min/max bound or a pair count is structurally invalid."""


class InsufficientElements(CardError):
    """Raised when fewer cards are given than a pattern or bound requires."""


class ExcessiveElements(CardError):
    """Raised when more cards are given than the declared maximum."""


class IsFull(CardError):
    """Raised when adding to a collection that already holds ``max_cards``."""


class IsEmpty(CardError):
    """Raised when removing from an empty collection."""


class NotFound(CardError):
    """Raised when a removal target is not present in the collection."""


class InvalidDuplicateCount(CardError):
    """Raised when the duplicate-pair structure does not match the pattern."""


class FeatureNotAllowed(CardError):
    """Raised when a game rule forbids a card variant, such as jokers."""
