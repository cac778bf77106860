import pytest

from poker_equity.helpers.cards import (
    BOARD_CAPACITY, CARDS, Card, Hand, parse_board, parse_cards, parse_hand,
)
from poker_equity.helpers.errors import ConfigurationError, ParseError


def test_card_universe_is_52_distinct():
    assert len(CARDS) == 52
    assert len(set(CARDS)) == 52


def test_card_from_str_is_case_insensitive():
    assert Card.from_str("as") == Card.from_str("AS") == Card(14, "s")
    assert str(Card.from_str("tH")) == "Th"


def test_parse_hand_basic_ops():
    h = parse_hand("As Kd")
    assert len(h) == 2
    assert not h.is_empty()
    assert h.contains(Card.from_str("As"))
    assert Card.from_str("Kd") in h
    assert Card.from_str("Ks") not in h
    assert str(h) == "As Kd"


def test_empty_hand():
    h = parse_hand("")
    assert h.is_empty()
    assert len(h) == 0
    assert h.missing == 2


@pytest.mark.parametrize("text", ["Ax", "A", "10s", "As Kd Q"])
def test_parse_rejects_malformed_tokens(text):
    with pytest.raises(ParseError):
        parse_hand(text)


def test_parse_rejects_repeated_card():
    with pytest.raises(ParseError):
        parse_board("As Kd As")


def test_parse_rejects_too_many_cards_for_role():
    with pytest.raises(ParseError, match="Maximum 2 cards allowed"):
        parse_hand("As Kd Qh")
    with pytest.raises(ParseError, match="Maximum 5 cards allowed"):
        parse_board("As Kd Qh Jc Ts 9s")


def test_hand_equality_ignores_order():
    assert parse_hand("As Kd") == parse_hand("Kd As")
    assert hash(parse_hand("As Kd")) == hash(parse_hand("Kd As"))
    assert parse_hand("As Kd") != parse_board("As Kd")


def test_extend_returns_new_hand():
    board = parse_board("2c 3c")
    bigger = board.extend(parse_cards(["4c", "5c"]))
    assert len(board) == 2
    assert len(bigger) == 4
    assert bigger.capacity == BOARD_CAPACITY


def test_extend_with_capacity_override():
    hole = parse_hand("As Kd")
    seven = hole.extend(parse_board("2c 3c 4c 5c 6c"), 7)
    assert len(seven) == 7


def test_extend_duplicate_is_an_assertion():
    hole = parse_hand("As")
    with pytest.raises(AssertionError):
        hole.extend(parse_cards(["As"]))


def test_extend_over_capacity_is_an_assertion():
    hole = parse_hand("As")
    with pytest.raises(AssertionError):
        hole.extend(parse_cards(["Kd", "Qh"]))


def test_direct_construction_checks_capacity():
    with pytest.raises(ConfigurationError):
        Hand.of(["As", "Kd", "Qh"])
    with pytest.raises(ConfigurationError):
        Hand.of(["As", "As"])
