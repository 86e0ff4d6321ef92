"""Card abstractions and helpers shared by every rule in the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

__all__ = [
    "Color",
    "Suit",
    "Rank",
    "Card",
    "ACE_HIGH_POSITION",
    "JOKER_POINTS",
    "cards_from_codes",
    "sort_cards",
]

ACE_HIGH_POSITION: Final[int] = 14
JOKER_POINTS: Final[int] = 0


class Color(str, Enum):
    """Card colors; used directly only to tell the two jokers apart."""

    RED = "R"
    BLACK = "B"


class Suit(str, Enum):
    """Enumeration of the four canonical suits."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def color(self) -> Color:
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


class Rank(str, Enum):
    """Card ranks.

    ``ONE`` is the numeral spelling of the ace and compares equal to it on
    cards; ``JOKER`` is the non-ordinal wildcard marker.
    """

    ACE = "A"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    JOKER = "JOKER"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return the thirteen standard ranks in ladder order, ace first."""

        return (
            cls.ACE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
            cls.TEN,
            cls.JACK,
            cls.QUEEN,
            cls.KING,
        )

    @property
    def canonical(self) -> "Rank":
        """Return the rank used for identity, folding ``ONE`` into ``ACE``."""

        return Rank.ACE if self is Rank.ONE else self

    @property
    def is_ace(self) -> bool:
        return self.canonical is Rank.ACE

    @property
    def is_royal(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def points(self) -> int:
        return _POINTS[self]

    def position(self, ace_high: bool = False) -> int | None:
        """Return the ladder position, or ``None`` for the joker."""

        if self.is_ace:
            return ACE_HIGH_POSITION if ace_high else 1
        return _POSITIONS.get(self)


_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}
_POSITIONS: Final[dict[Rank, int]] = {
    rank: idx for idx, rank in enumerate(Rank.ordered(), start=1)
}
_POINTS: Final[dict[Rank, int]] = {
    **{rank: min(position, 10) for rank, position in _POSITIONS.items()},
    Rank.ONE: 1,
    Rank.JOKER: JOKER_POINTS,
}


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """Value object describing a physical playing card.

    Jokers never carry a suit; they may carry a ``color`` so the red and
    black joker of a deck stay distinguishable when displayed. Equality is
    defined over rank and suit only, with ``Rank.ONE`` equal to ``Rank.ACE``.
    """

    rank: Rank
    suit: Suit | None = None
    color: Color | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"invalid rank {self.rank!r}")
        if self.rank is Rank.JOKER:
            if self.suit is not None:
                raise ValueError("a joker cannot carry a suit")
            if self.color is not None and not isinstance(self.color, Color):
                raise ValueError(f"invalid joker color {self.color!r}")
            return
        if not isinstance(self.suit, Suit):
            raise ValueError(f"{self.rank.name.lower()} requires one of the four suits")
        if self.color is not None:
            raise ValueError("only jokers carry an explicit color")

    @classmethod
    def joker(cls, color: Color | None = None) -> "Card":
        return cls(Rank.JOKER, None, color)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse codes such as ``"10H"``, ``"AS"``, ``"1C"`` or ``"JOKER-R"``."""

        text = code.strip().upper()
        head, _, color = text.partition("-")
        if head == "JOKER":
            if not color:
                return cls.joker()
            try:
                return cls.joker(Color(color))
            except ValueError:
                raise ValueError(f"invalid card code '{code}'") from None
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        try:
            rank = Rank(text[:-1])
            suit = Suit(text[-1])
        except ValueError:
            raise ValueError(f"invalid card code '{code}'") from None
        if rank is Rank.JOKER:
            raise ValueError(f"invalid card code '{code}'")
        return cls(rank, suit)

    @property
    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    @property
    def is_wildcard(self) -> bool:
        """Return ``True`` for cards that stand in for any other card."""

        return self.is_joker

    @property
    def is_royal(self) -> bool:
        return self.rank.is_royal

    @property
    def points(self) -> int:
        return self.rank.points

    @property
    def position(self) -> int | None:
        """Ace-low ladder position, ``None`` for jokers."""

        return self.rank.position()

    def position_for(self, ace_high: bool = False) -> int | None:
        return self.rank.position(ace_high)

    @property
    def card_color(self) -> Color | None:
        if self.suit is not None:
            return self.suit.color
        return self.color

    @property
    def code(self) -> str:
        if self.is_joker:
            return "JOKER" if self.color is None else f"JOKER-{self.color.value}"
        return f"{self.rank.value}{self.suit.value}"

    def label(self) -> str:
        """Create a display label with the suit symbol."""

        if self.is_joker:
            return "🃏"
        return f"{self.rank.value}{self.suit.symbol}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.canonical is other.rank.canonical and self.suit is other.suit

    def __hash__(self) -> int:
        return hash((self.rank.canonical, self.suit))

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return f"Card({self.code})"


def cards_from_codes(codes: str | Iterable[str]) -> list[Card]:
    """Parse whitespace separated codes (or an iterable of codes) into cards."""

    if isinstance(codes, str):
        codes = codes.split()
    return [Card.from_code(code) for code in codes]


def sort_cards(cards: Iterable[Card], ace_high: bool = False) -> list[Card]:
    """Sort by ladder position then suit; jokers go last."""

    suit_order = {suit: idx for idx, suit in enumerate(Suit)}

    def _key(card: Card) -> tuple[int, int]:
        position = card.position_for(ace_high)
        return (
            position if position is not None else ACE_HIGH_POSITION + 1,
            suit_order.get(card.suit, len(suit_order)),
        )

    return sorted(cards, key=_key)
