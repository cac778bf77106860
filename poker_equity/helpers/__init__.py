# cards
from .cards import (
    Card, Hand, CARDS, RANKS, SUITS, HOLE_CAPACITY, BOARD_CAPACITY,
    parse_cards, parse_hand, parse_board, make_deck,
)

# deck
from .deck import Deck

# evaluation
from .evaluator import rank, hand_category, straight_high, CATEGORY, Rank, Evaluator

# errors
from .errors import ParseError, ConfigurationError, InsufficientCards

__all__ = [
    # cards
    "Card", "Hand", "CARDS", "RANKS", "SUITS", "HOLE_CAPACITY", "BOARD_CAPACITY",
    "parse_cards", "parse_hand", "parse_board", "make_deck",

    # deck
    "Deck",

    # evaluation
    "rank", "hand_category", "straight_high", "CATEGORY", "Rank", "Evaluator",

    # errors
    "ParseError", "ConfigurationError", "InsufficientCards",
]
