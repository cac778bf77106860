from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import ConfigurationError, ParseError

RANKS = "23456789TJQKA"
SUITS = "shdc"
RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}

HOLE_CAPACITY = 2
BOARD_CAPACITY = 5


@dataclass(frozen=True, order=True)
class Card:
    val: int
    suit: str

    def __str__(self) -> str:
        return f"{VAL_TO_RANK[self.val]}{self.suit}"

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if len(s) != 2:
            raise ParseError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), s[1].lower()
        if r not in RANK_TO_VAL or su not in SUITS:
            raise ParseError(f"Bad card string: {s!r}")
        return Card(RANK_TO_VAL[r], su)


# The 52-card universe, rank-major. Never mutated.
CARDS: Tuple[Card, ...] = tuple(Card(RANK_TO_VAL[r], s) for r in RANKS for s in SUITS)


def parse_cards(cards: Iterable[Union[str, Card]]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        out.append(x if isinstance(x, Card) else Card.from_str(x))
    return out


def make_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    dead = set(exclude)
    return [c for c in CARDS if c not in dead]


@dataclass(frozen=True, eq=False)
class Hand:
    """
    Duplicate-free set of cards with a capacity ceiling:
    HOLE_CAPACITY for a player's hole cards, BOARD_CAPACITY for the board.

    A hand with fewer cards than its capacity is incomplete; the missing
    cards are filled in by sampling. Insertion order is kept for display only,
    equality ignores it.
    """
    cards: Tuple[Card, ...] = ()
    capacity: int = HOLE_CAPACITY

    def __post_init__(self) -> None:
        if len(self.cards) > self.capacity:
            raise ConfigurationError(f"Maximum {self.capacity} cards allowed")
        if len(set(self.cards)) != len(self.cards):
            raise ConfigurationError(f"Duplicate cards in hand: {self}")

    @classmethod
    def parse(cls, text: str, capacity: int = HOLE_CAPACITY) -> "Hand":
        return parse_hand(text, capacity)

    @classmethod
    def of(cls, cards: Iterable[Union[str, Card]], capacity: int = HOLE_CAPACITY) -> "Hand":
        return cls(tuple(parse_cards(cards)), capacity)

    def contains(self, card: Card) -> bool:
        return card in self.cards

    def is_empty(self) -> bool:
        return not self.cards

    @property
    def missing(self) -> int:
        return self.capacity - len(self.cards)

    def extend(self, other: Iterable[Card], capacity: int = 0) -> "Hand":
        """
        Union of this hand and `other` as a new Hand.

        `capacity` overrides the ceiling of the result (a hole hand joined with
        the board is a 7-card evaluation hand). Duplicates mean the caller dealt
        a card twice, which is a bug, so they are asserted rather than raised.
        """
        extra = tuple(other)
        cards = self.cards + extra
        cap = capacity or self.capacity
        assert len(set(cards)) == len(cards), f"card dealt twice: {self} + {' '.join(map(str, extra))}"
        assert len(cards) <= cap, f"hand over capacity {cap}"
        return Hand(cards, cap)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.capacity == other.capacity and frozenset(self.cards) == frozenset(other.cards)

    def __hash__(self) -> int:
        return hash((frozenset(self.cards), self.capacity))

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)


def parse_hand(text: str, capacity: int = HOLE_CAPACITY) -> Hand:
    """Parse "As Kd" style text into a Hand of at most `capacity` cards."""
    tokens = text.split()
    cards = parse_cards(tokens)
    if len(set(cards)) != len(cards):
        raise ParseError(f"Duplicate card in {text!r}")
    if len(cards) > capacity:
        raise ParseError(f"Maximum {capacity} cards allowed")
    return Hand(tuple(cards), capacity)


def parse_board(text: str) -> Hand:
    return parse_hand(text, BOARD_CAPACITY)
