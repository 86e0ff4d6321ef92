"""Deck assembly helpers for standard 52-card decks with optional jokers."""

from __future__ import annotations

from typing import Iterable, Iterator

from .cards import Card, Color, Rank, Suit

__all__ = [
    "NUMERAL_RANKS",
    "FACE_RANKS",
    "numeral_cards",
    "face_cards",
    "standard_cards",
    "cards_of",
    "jokers",
    "all_cards",
    "iter_full_deck",
]

NUMERAL_RANKS: tuple[Rank, ...] = Rank.ordered()[:10]
FACE_RANKS: tuple[Rank, ...] = Rank.ordered()[10:]


def numeral_cards(suit: Suit) -> list[Card]:
    """Return ace through ten of ``suit``."""

    return [Card(rank, suit) for rank in NUMERAL_RANKS]


def face_cards(suit: Suit) -> list[Card]:
    """Return jack, queen and king of ``suit``."""

    return [Card(rank, suit) for rank in FACE_RANKS]


def standard_cards(suit: Suit) -> list[Card]:
    """Return the thirteen standard cards of ``suit`` in ladder order."""

    return numeral_cards(suit) + face_cards(suit)


def cards_of(suits: Iterable[Suit]) -> list[Card]:
    cards: list[Card] = []
    for suit in suits:
        cards.extend(standard_cards(suit))
    return cards


def jokers() -> list[Card]:
    """Return the red and black joker."""

    return [Card.joker(Color.RED), Card.joker(Color.BLACK)]


def all_cards(suit: Suit | None = None, jokers_included: bool = False) -> list[Card]:
    """Return every standard card of ``suit`` (or of all suits), plus jokers on request."""

    cards = standard_cards(suit) if suit is not None else cards_of(Suit)
    if jokers_included:
        cards.extend(jokers())
    return cards


def iter_full_deck(jokers_included: bool = False) -> Iterator[Card]:
    """Yield all physical cards in a fresh deck."""

    yield from all_cards(jokers_included=jokers_included)
