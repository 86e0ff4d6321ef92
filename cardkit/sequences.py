"""Pure functions that judge ordered card sequences.

Cards are judged in the order given; nothing here re-sorts its input.
Callers present cards in the order that should count as "sequential"
(see :func:`cardkit.cards.sort_cards`).

Ranks are compared through :attr:`Rank.canonical`, so ``Rank.ONE`` and
``Rank.ACE`` group together. Jokers have no ladder position and never form
part of a sequence.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .cards import Card, Rank
from .errors import InsufficientElements, InvalidDuplicateCount, InvalidRange

__all__ = [
    "MIN_SEQUENTIAL_CARDS",
    "MIN_SEQUENTIAL_WITH_PAIRS_CARDS",
    "all_equal_rank",
    "all_equal_suit",
    "is_sequential",
    "is_sequential_with_pairs",
    "group_by_rank",
    "duplicate_groups",
    "pair_counts_by_rank",
    "total_pair_count",
    "sum_points",
]

logger = logging.getLogger(__name__)

MIN_SEQUENTIAL_CARDS = 2
MIN_SEQUENTIAL_WITH_PAIRS_CARDS = 3


def all_equal_rank(cards: Sequence[Card]) -> bool:
    if not cards:
        return True
    first = cards[0].rank.canonical
    return all(card.rank.canonical is first for card in cards)


def all_equal_suit(cards: Sequence[Card]) -> bool:
    if not cards:
        return True
    first = cards[0].suit
    return all(card.suit is first for card in cards)


def _position_steps(cards: Sequence[Card], ace_high: bool) -> np.ndarray | None:
    """Return the differences between adjacent positions, ``None`` if a joker is present."""

    positions = [card.position_for(ace_high) for card in cards]
    if any(position is None for position in positions):
        return None
    return np.diff(np.asarray(positions, dtype=np.int16))


def is_sequential(cards: Sequence[Card], ace_high: bool = False) -> bool:
    """Return ``True`` when every card sits exactly one position above the previous one."""

    if len(cards) < MIN_SEQUENTIAL_CARDS:
        logger.debug("sequence check needs %d cards, got %d", MIN_SEQUENTIAL_CARDS, len(cards))
        raise InsufficientElements(
            f"the collection must contain at least {MIN_SEQUENTIAL_CARDS} cards"
        )
    steps = _position_steps(cards, ace_high)
    if steps is None:
        return False
    return bool(np.all(steps == 1))


def is_sequential_with_pairs(
    cards: Sequence[Card],
    pairs: int,
    ace_high: bool = False,
    allow_multiple_groups: bool = True,
) -> bool:
    """Return ``True`` for a ladder in which duplicates repeat a rung.

    ``pairs`` is the exact number of unordered same-rank pairs the cards must
    contain (three of a rank count as three pairs). With
    ``allow_multiple_groups=False`` only one rank may be duplicated.
    """

    if len(cards) < MIN_SEQUENTIAL_WITH_PAIRS_CARDS:
        logger.debug(
            "paired sequence check needs %d cards, got %d",
            MIN_SEQUENTIAL_WITH_PAIRS_CARDS,
            len(cards),
        )
        raise InsufficientElements(
            f"the collection must contain at least {MIN_SEQUENTIAL_WITH_PAIRS_CARDS} cards"
        )
    if pairs < 1:
        raise InvalidRange("the number of pairs must be >= 1")

    pair_counts = pair_counts_by_rank(cards)
    pair_total = sum(pair_counts.values())
    if pair_total != pairs:
        qualifier = "" if pair_total < pairs else "only "
        plural = "s" if pairs > 1 else ""
        logger.debug("expected %d pairs, found %d", pairs, pair_total)
        raise InvalidDuplicateCount(
            f"the collection must contain {qualifier}{pairs} pair{plural}"
        )
    if not allow_multiple_groups and len(pair_counts) > 1:
        logger.debug("expected one duplicated rank, found %d", len(pair_counts))
        raise InvalidDuplicateCount("the collection must contain only one grouping of pairs")

    steps = _position_steps(cards, ace_high)
    if steps is None:
        return False
    return bool(np.all((steps == 1) | (steps == 0)))


def group_by_rank(cards: Sequence[Card]) -> dict[Rank, list[Card]]:
    """Group cards by canonical rank, keeping their relative order."""

    groups: dict[Rank, list[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank.canonical, []).append(card)
    return groups


def duplicate_groups(cards: Sequence[Card]) -> dict[Rank, list[Card]]:
    return {rank: group for rank, group in group_by_rank(cards).items() if len(group) > 1}


def pair_counts_by_rank(cards: Sequence[Card]) -> dict[Rank, int]:
    """Map each duplicated rank to the number of unordered pairs it forms."""

    return {
        rank: len(group) * (len(group) - 1) // 2
        for rank, group in duplicate_groups(cards).items()
    }


def total_pair_count(cards: Sequence[Card]) -> int:
    return sum(pair_counts_by_rank(cards).values())


def sum_points(cards: Sequence[Card]) -> int:
    return sum(card.points for card in cards)
