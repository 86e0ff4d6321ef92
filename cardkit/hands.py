"""Bounded card collections used as the base for hands and hand ranks."""

from __future__ import annotations

import logging
import sys
from typing import Final, Iterable, Iterator

from .cards import Card
from .errors import (
    ExcessiveElements,
    InsufficientElements,
    InvalidRange,
    IsEmpty,
    IsFull,
    NotFound,
)

__all__ = ["MAX_CARDS", "CardCollection", "Hand"]

logger = logging.getLogger(__name__)

MAX_CARDS: Final[int] = sys.maxsize


def _check_bounds(count: int, min_cards: int, max_cards: int) -> None:
    if min_cards < 0:
        logger.debug("rejecting bounds %d..%d: negative min", min_cards, max_cards)
        raise InvalidRange("min_cards must be >= 0")
    if max_cards < 1:
        logger.debug("rejecting bounds %d..%d: max below one", min_cards, max_cards)
        raise InvalidRange("max_cards must be >= 1")
    if max_cards < min_cards:
        logger.debug("rejecting bounds %d..%d: max below min", min_cards, max_cards)
        raise InvalidRange("max_cards must be >= min_cards")
    if count > max_cards:
        logger.debug("rejecting %d cards: above max %d", count, max_cards)
        raise ExcessiveElements(f"expected at most {max_cards} cards, got {count}")
    if count < min_cards:
        logger.debug("rejecting %d cards: below min %d", count, min_cards)
        raise InsufficientElements(f"expected at least {min_cards} cards, got {count}")


class CardCollection:
    """Read-only, ordered collection of cards bounded by ``min_cards``/``max_cards``.

    Cards keep their insertion order and duplicates are allowed. The bounds
    are fixed at construction and the initial cards must satisfy them.
    """

    __slots__ = ("_cards", "_min_cards", "_max_cards")

    def __init__(
        self,
        cards: Iterable[Card] = (),
        min_cards: int = 0,
        max_cards: int = MAX_CARDS,
    ) -> None:
        initial = list(cards)
        _check_bounds(len(initial), min_cards, max_cards)
        self._cards = initial
        self._min_cards = min_cards
        self._max_cards = max_cards

    @property
    def min_cards(self) -> int:
        return self._min_cards

    @property
    def max_cards(self) -> int:
        return self._max_cards

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the cards in insertion order."""

        return tuple(self._cards)

    def sum_points(self) -> int:
        return sum(card.points for card in self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def is_full(self) -> bool:
        return len(self._cards) == self._max_cards

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __repr__(self) -> str:
        labels = " ".join(card.code for card in self._cards)
        return f"{type(self).__name__}([{labels}])"


class Hand(CardCollection):
    """Mutable bounded collection; every check runs before the cards change."""

    __slots__ = ()

    def add(self, card: Card) -> None:
        if self.is_full():
            logger.debug("cannot add %r: hand holds %d cards", card, self.count)
            raise IsFull(f"hand already holds the maximum of {self.max_cards} cards")
        self._cards.append(card)

    def add_all(self, cards: Iterable[Card]) -> None:
        """Append ``cards`` in order, or none of them if they would not fit."""

        batch = list(cards)
        if self.count + len(batch) > self.max_cards:
            logger.debug("cannot add %d cards to %d of %d", len(batch), self.count, self.max_cards)
            raise ExcessiveElements(
                f"adding {len(batch)} cards would exceed the maximum of {self.max_cards}"
            )
        self._cards.extend(batch)

    def remove(self, card: Card) -> Card:
        """Remove and return the first card equal to ``card``."""

        if self.is_empty():
            raise IsEmpty("cannot remove from an empty hand")
        try:
            index = self._cards.index(card)
        except ValueError:
            logger.debug("cannot remove %r: not in hand", card)
            raise NotFound(f"{card!r} is not in the hand") from None
        if self.count == self.min_cards:
            raise InsufficientElements(f"hand must keep at least {self.min_cards} cards")
        return self._cards.pop(index)
