"""Cribbage hands and show scoring built on the hand-rank classifiers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Final, Iterable, Sequence

from . import sequences
from .cards import Card, Rank, sort_cards
from .errors import FeatureNotAllowed
from .hands import Hand
from .ranks import Fifteen, Flush, HandRank, Pair, Run

__all__ = [
    "CribbageRules",
    "DEFAULT_RULES",
    "CribbageHand",
    "ScoreBreakdown",
    "score_hand",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CribbageRules:
    """Table rules that shape a hand and its show."""

    hand_size: int = 4
    nobs_points: int = 1
    hand_flush_cards: int = 4
    crib_flush_cards: int = 5

    def __post_init__(self) -> None:
        if self.hand_size < 1:
            raise ValueError("hand_size must be positive")
        if self.nobs_points < 0:
            raise ValueError("nobs_points must not be negative")
        if not Flush.min_size <= self.hand_flush_cards <= self.crib_flush_cards <= Flush.max_size:
            raise ValueError(
                f"flush sizes must satisfy {Flush.min_size} <= hand <= crib <= {Flush.max_size}"
            )


DEFAULT_RULES: Final[CribbageRules] = CribbageRules()


def _reject_jokers(cards: Sequence[Card]) -> None:
    if any(card.is_wildcard for card in cards):
        logger.debug("rejecting cards %s: contains a joker", cards)
        raise FeatureNotAllowed("jokers are not allowed in a cribbage hand")


class CribbageHand(Hand):
    """A player's cards plus the shared cut card; jokers are not allowed."""

    __slots__ = ("_cut_card", "_rules")

    def __init__(
        self,
        cards: Iterable[Card],
        cut_card: Card,
        rules: CribbageRules = DEFAULT_RULES,
    ) -> None:
        members = list(cards)
        _reject_jokers(members)
        if cut_card.is_wildcard:
            logger.debug("rejecting cut card %r: joker", cut_card)
            raise FeatureNotAllowed("the cut card cannot be a joker")
        super().__init__(members, 0, rules.hand_size)
        self._cut_card = cut_card
        self._rules = rules

    def add(self, card: Card) -> None:
        _reject_jokers([card])
        super().add(card)

    def add_all(self, cards: Iterable[Card]) -> None:
        batch = list(cards)
        _reject_jokers(batch)
        super().add_all(batch)

    @property
    def cut_card(self) -> Card:
        return self._cut_card

    @property
    def rules(self) -> CribbageRules:
        return self._rules

    def all_cards(self) -> list[Card]:
        """Members in hand order followed by the cut card."""

        return [*self, self._cut_card]


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Every scoring combination found in a show, plus nobs."""

    ranks: tuple[HandRank, ...]
    nobs: int = 0

    @property
    def total(self) -> int:
        return sum(rank.points for rank in self.ranks) + self.nobs

    def of_type(self, kind: type[HandRank]) -> list[HandRank]:
        return [rank for rank in self.ranks if type(rank) is kind]


def _fifteens(cards: Sequence[Card]) -> list[HandRank]:
    found: list[HandRank] = []
    for size in range(Fifteen.min_size, len(cards) + 1):
        for combo in combinations(cards, size):
            if sequences.sum_points(combo) == Fifteen.target:
                found.append(Fifteen(combo))
    return found


def _pairs(cards: Sequence[Card]) -> list[HandRank]:
    return [
        Pair(combo)
        for combo in combinations(cards, 2)
        if sequences.all_equal_rank(combo)
    ]


def _runs(cards: Sequence[Card]) -> list[HandRank]:
    """Return every run of the longest length present; shorter runs inside it do not score."""

    for size in range(len(cards), Run.min_size - 1, -1):
        found: list[HandRank] = []
        for combo in combinations(cards, size):
            ordered = sort_cards(combo)
            if sequences.is_sequential(ordered):
                found.append(Run(ordered))
        if found:
            return found
    return []


def _flush(hand: CribbageHand, is_crib: bool) -> HandRank | None:
    rules = hand.rules
    combined = hand.all_cards()
    if rules.crib_flush_cards <= len(combined) <= Flush.max_size and sequences.all_equal_suit(combined):
        return Flush(combined)
    if is_crib:
        return None
    members = list(hand)
    if rules.hand_flush_cards <= len(members) <= Flush.max_size and sequences.all_equal_suit(members):
        return Flush(members)
    return None


def _has_nobs(hand: CribbageHand) -> bool:
    cut_suit = hand.cut_card.suit
    return any(card.rank is Rank.JACK and card.suit is cut_suit for card in hand)


def score_hand(hand: CribbageHand, is_crib: bool = False) -> ScoreBreakdown:
    """Score a show: fifteens, pairs, runs, flush and nobs.

    Runs are credited once per distinct combination of the longest length,
    which is how double and triple runs accumulate. A crib only scores a
    flush when the cut card matches as well.
    """

    cards = hand.all_cards()
    ranks: list[HandRank] = []
    ranks.extend(_fifteens(cards))
    ranks.extend(_pairs(cards))
    ranks.extend(_runs(cards))
    flush = _flush(hand, is_crib)
    if flush is not None:
        ranks.append(flush)
    nobs = hand.rules.nobs_points if _has_nobs(hand) else 0
    breakdown = ScoreBreakdown(ranks=tuple(ranks), nobs=nobs)
    logger.debug("scored %s (crib=%s): %d", cards, is_crib, breakdown.total)
    return breakdown
