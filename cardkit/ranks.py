"""Hand ranks: immutable, validated groupings of cards that score points.

A hand rank judges its cards exactly once, when it is constructed. Cards are
judged in the order given, so runs must be presented in ladder order (see
:func:`cardkit.cards.sort_cards`). Construction raises
:class:`~cardkit.errors.InsufficientElements` when the cards do not form the
pattern and :class:`~cardkit.errors.ExcessiveElements` when there are too many
of them. Jokers never satisfy a pattern.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Iterable, Sequence

from . import sequences
from .cards import Card
from .errors import ExcessiveElements, InsufficientElements, InvalidDuplicateCount
from .hands import MAX_CARDS, CardCollection

__all__ = [
    "HandRank",
    "Kind",
    "Pair",
    "Flush",
    "Run",
    "DoubleRun",
    "DoubleDoubleRun",
    "TripleRun",
    "Fifteen",
    "FIFTEEN_TOTAL",
]

logger = logging.getLogger(__name__)

FIFTEEN_TOTAL = 15


class HandRank(CardCollection):
    """Base class for every named pattern.

    Subclasses set ``min_size``/``max_size`` and implement ``_matches``,
    ``_score`` and ``_describe``. ``points`` and ``title`` are computed once
    and cached; the instance rejects attribute assignment afterwards.
    """

    __slots__ = ("_points", "_title", "_sealed")

    min_size: ClassVar[int] = 1
    max_size: ClassVar[int] = MAX_CARDS
    label: ClassVar[str] = "hand rank"

    def __init__(self, cards: Iterable[Card]) -> None:
        judged = list(cards)
        if len(judged) < self.min_size:
            logger.debug("%s needs %d cards, got %d", self.label, self.min_size, len(judged))
            raise InsufficientElements(
                f"a {self.label} needs at least {self.min_size} cards, got {len(judged)}"
            )
        if len(judged) > self.max_size:
            logger.debug("%s allows %d cards, got %d", self.label, self.max_size, len(judged))
            raise ExcessiveElements(
                f"a {self.label} allows at most {self.max_size} cards, got {len(judged)}"
            )
        if any(card.is_wildcard for card in judged) or not self._matches(judged):
            logger.debug("cards %s do not form a %s", judged, self.label)
            raise InsufficientElements(f"the cards do not form a {self.label}")

        super().__init__(judged, self.min_size, self.max_size)
        self._points = self._score(judged)
        self._title = self._describe(len(judged))
        self._sealed = True

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def points(self) -> int:
        return self._points

    @property
    def title(self) -> str:
        return self._title

    def _matches(self, cards: Sequence[Card]) -> bool:
        raise NotImplementedError

    def _score(self, cards: Sequence[Card]) -> int:
        raise NotImplementedError

    def _describe(self, count: int) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        if not getattr(self, "_sealed", False):
            return f"<unbuilt {type(self).__name__}>"
        labels = " ".join(card.code for card in self)
        return f"{type(self).__name__}({self._title!r}, [{labels}], points={self._points})"


class Kind(HandRank):
    """Two or more cards of one rank; scores two points per unordered pair."""

    __slots__ = ()

    min_size = 2
    label = "kind"

    def _matches(self, cards: Sequence[Card]) -> bool:
        return sequences.all_equal_rank(cards)

    def _score(self, cards: Sequence[Card]) -> int:
        return 2 * sequences.total_pair_count(cards)

    def _describe(self, count: int) -> str:
        return f"{count} of a Kind"


class Pair(Kind):
    __slots__ = ()

    max_size = 2
    label = "pair"

    def _describe(self, count: int) -> str:
        return "Pair"


class Flush(HandRank):
    """Four or five cards of one suit; one point per card."""

    __slots__ = ()

    min_size = 4
    max_size = 5
    label = "flush"

    def _matches(self, cards: Sequence[Card]) -> bool:
        return sequences.all_equal_suit(cards)

    def _score(self, cards: Sequence[Card]) -> int:
        return len(cards)

    def _describe(self, count: int) -> str:
        return f"{count}-Card Flush"


class Run(HandRank):
    """Three or more cards climbing the ladder one rank at a time; one point per card.

    With ``ace_high=True`` the ace sits above the king instead of below the two.
    """

    __slots__ = ("_ace_high",)

    min_size = 3
    max_size = 13
    label = "run"

    def __init__(self, cards: Iterable[Card], ace_high: bool = False) -> None:
        self._ace_high = ace_high
        super().__init__(cards)

    @property
    def ace_high(self) -> bool:
        return self._ace_high

    def _matches(self, cards: Sequence[Card]) -> bool:
        return sequences.is_sequential(cards, ace_high=self._ace_high)

    def _score(self, cards: Sequence[Card]) -> int:
        return len(cards)

    def _describe(self, count: int) -> str:
        return f"Run of {count}"


class _PairedRun(Run):
    """A run in which some rungs are held by more than one card."""

    __slots__ = ()

    pairs: ClassVar[int] = 1
    allow_multiple_groups: ClassVar[bool] = False

    def _matches(self, cards: Sequence[Card]) -> bool:
        try:
            return sequences.is_sequential_with_pairs(
                cards,
                self.pairs,
                ace_high=self._ace_high,
                allow_multiple_groups=self.allow_multiple_groups,
            )
        except InvalidDuplicateCount as exc:
            logger.debug("%s rejected: %s", self.label, exc)
            return False

    @staticmethod
    def run_length(cards: Sequence[Card]) -> int:
        return len(sequences.group_by_rank(cards))


class DoubleRun(_PairedRun):
    """A run of three or four with exactly one paired rung.

    Scores the run twice plus the pair: 8 for a run of three, 10 for a run of four.
    """

    __slots__ = ()

    min_size = 4
    max_size = 5
    label = "double run"

    def _score(self, cards: Sequence[Card]) -> int:
        return 2 * self.run_length(cards) + 2

    def _describe(self, count: int) -> str:
        return f"Double Run of {count - 1}"


class DoubleDoubleRun(_PairedRun):
    """A run of three with two paired rungs, worth 16."""

    __slots__ = ()

    min_size = 5
    max_size = 5
    pairs = 2
    allow_multiple_groups = True
    label = "double double run"

    def _score(self, cards: Sequence[Card]) -> int:
        return 16

    def _describe(self, count: int) -> str:
        return "Double Double Run"


class TripleRun(_PairedRun):
    """A run of three with one rung held three times, worth 15."""

    __slots__ = ()

    min_size = 5
    max_size = 5
    pairs = 3
    label = "triple run"

    def _score(self, cards: Sequence[Card]) -> int:
        return 15

    def _describe(self, count: int) -> str:
        return "Triple Run"


class Fifteen(HandRank):
    """Two or more cards whose points add up to fifteen; worth two."""

    __slots__ = ()

    min_size = 2
    target: ClassVar[int] = FIFTEEN_TOTAL
    label = "fifteen"

    def _matches(self, cards: Sequence[Card]) -> bool:
        return sequences.sum_points(cards) == self.target

    def _score(self, cards: Sequence[Card]) -> int:
        return 2

    def _describe(self, count: int) -> str:
        return "Fifteen"
