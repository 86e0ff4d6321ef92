from __future__ import annotations

import pytest

from cardkit import sequences
from cardkit.cards import Card, Rank, Suit, cards_from_codes
from cardkit.errors import InsufficientElements, InvalidDuplicateCount, InvalidRange


@pytest.mark.parametrize(
    "codes",
    [
        "",
        "7H",
        "7H 7C 7D",
        "AS 1H",
    ],
)
def test_all_equal_rank_true(codes: str) -> None:
    assert sequences.all_equal_rank(cards_from_codes(codes))


def test_all_equal_rank_false_for_mixed_ranks() -> None:
    assert not sequences.all_equal_rank(cards_from_codes("7H 7C 8D"))


@pytest.mark.parametrize("codes", ["", "2H", "2H 9H KH"])
def test_all_equal_suit_true(codes: str) -> None:
    assert sequences.all_equal_suit(cards_from_codes(codes))


def test_all_equal_suit_false_for_mixed_suits() -> None:
    assert not sequences.all_equal_suit(cards_from_codes("2H 9H KD"))


@pytest.mark.parametrize("codes", ["", "5H"])
def test_is_sequential_needs_two_cards(codes: str) -> None:
    with pytest.raises(InsufficientElements):
        sequences.is_sequential(cards_from_codes(codes))


@pytest.mark.parametrize(
    ("codes", "ace_high", "expected"),
    [
        ("3H 4C 5D", False, True),
        ("3H 5D", False, False),
        ("5D 4C 3H", False, False),
        ("AH 2C 3D", False, True),
        ("1H 2C 3D", False, True),
        ("AH 2C 3D", True, False),
        ("QH KC AD", True, True),
        ("QH KC AD", False, False),
        ("3H 3C 4D", False, False),
        ("3H JOKER 5D", False, False),
    ],
)
def test_is_sequential(codes: str, ace_high: bool, expected: bool) -> None:
    assert sequences.is_sequential(cards_from_codes(codes), ace_high=ace_high) is expected


def test_is_sequential_with_pairs_accepts_repeated_rungs() -> None:
    cards = cards_from_codes("3H 3C 4D 5S")
    assert sequences.is_sequential_with_pairs(cards, pairs=1)


def test_is_sequential_with_pairs_rejects_gaps() -> None:
    cards = cards_from_codes("3H 3C 5D")
    assert not sequences.is_sequential_with_pairs(cards, pairs=1)


def test_is_sequential_with_pairs_respects_ace_high() -> None:
    cards = cards_from_codes("QH KC KD AS")
    assert sequences.is_sequential_with_pairs(cards, pairs=1, ace_high=True)
    assert not sequences.is_sequential_with_pairs(cards, pairs=1)


def test_is_sequential_with_pairs_needs_three_cards() -> None:
    with pytest.raises(InsufficientElements):
        sequences.is_sequential_with_pairs(cards_from_codes("3H 3C"), pairs=1)


def test_is_sequential_with_pairs_rejects_pair_count_below_one() -> None:
    with pytest.raises(InvalidRange):
        sequences.is_sequential_with_pairs(cards_from_codes("3H 3C 4D"), pairs=0)


@pytest.mark.parametrize(
    ("codes", "pairs"),
    [
        ("3H 4C 5D", 1),
        ("3H 3C 4D 5S", 2),
        ("3H 3C 3D 4S 5S", 1),
    ],
)
def test_is_sequential_with_pairs_rejects_wrong_pair_count(codes: str, pairs: int) -> None:
    with pytest.raises(InvalidDuplicateCount):
        sequences.is_sequential_with_pairs(cards_from_codes(codes), pairs=pairs)


def test_is_sequential_with_pairs_single_group_rule() -> None:
    cards = cards_from_codes("3H 3C 4D 4S 5S")
    assert sequences.is_sequential_with_pairs(cards, pairs=2)
    with pytest.raises(InvalidDuplicateCount):
        sequences.is_sequential_with_pairs(cards, pairs=2, allow_multiple_groups=False)


def test_jokers_pair_up_but_never_form_a_ladder() -> None:
    cards = [Card(Rank.THREE, Suit.HEARTS), Card.joker(), Card.joker()]
    assert sequences.pair_counts_by_rank(cards) == {Rank.JOKER: 1}
    assert not sequences.is_sequential_with_pairs(cards, pairs=1)


def test_triple_counts_as_three_pairs_in_one_group() -> None:
    cards = cards_from_codes("3H 3C 3D 4S 5S")
    assert sequences.is_sequential_with_pairs(cards, pairs=3, allow_multiple_groups=False)


def test_group_by_rank_keeps_relative_order() -> None:
    cards = cards_from_codes("7H 2C 7D AS 1C")
    groups = sequences.group_by_rank(cards)
    assert list(groups) == [Rank.SEVEN, Rank.TWO, Rank.ACE]
    assert [card.code for card in groups[Rank.SEVEN]] == ["7H", "7D"]
    assert [card.code for card in groups[Rank.ACE]] == ["AS", "1C"]


def test_duplicate_groups_only_keeps_repeated_ranks() -> None:
    groups = sequences.duplicate_groups(cards_from_codes("7H 2C 7D 9S"))
    assert list(groups) == [Rank.SEVEN]


@pytest.mark.parametrize(
    ("codes", "expected"),
    [
        ("2C 5D 9H", 0),
        ("7H 2C 7D", 1),
        ("7H 7C 7D", 3),
        ("7H 7C 7D 7S", 6),
        ("7H 7C 2D 2S", 2),
    ],
)
def test_total_pair_count(codes: str, expected: int) -> None:
    assert sequences.total_pair_count(cards_from_codes(codes)) == expected


def test_pair_counts_by_rank() -> None:
    counts = sequences.pair_counts_by_rank(cards_from_codes("7H 7C 7D 2S 2C KH"))
    assert counts == {Rank.SEVEN: 3, Rank.TWO: 1}


def test_sum_points() -> None:
    assert sequences.sum_points([]) == 0
    assert sequences.sum_points(cards_from_codes("AH 5C 10D JS QH KC")) == 46
    assert sequences.sum_points([Card(Rank.ONE, Suit.HEARTS), Card.joker()]) == 1
    assert isinstance(sequences.sum_points(cards_from_codes("5H 5C")), int)
