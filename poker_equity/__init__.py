from .helpers import (
    Card,
    Hand,
    Deck,
    parse_hand,
    parse_board,
    rank,
    ParseError,
    ConfigurationError,
    InsufficientCards,
)
from .engine import EquityResult, compute_equity, simulate
from .config import EquityConfig

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "parse_hand",
    "parse_board",
    "rank",
    "ParseError",
    "ConfigurationError",
    "InsufficientCards",
    "EquityResult",
    "compute_equity",
    "simulate",
    "EquityConfig",
]
