from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from ..helpers.cards import Hand
from ..helpers.deck import Deck
from ..helpers.errors import ConfigurationError
from ..helpers.evaluator import Evaluator, rank
from .equity import DEFAULT_SEED, as_board, available_cards, iter_pot_shares


def convergence_curve(
    player: Hand,
    opponents: Sequence[Hand],
    board: Optional[Hand] = None,
    samples: int = 10_000,
    seed: int = DEFAULT_SEED,
    *,
    evaluator: Evaluator = rank,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Running equity estimate after every trial of one sequential simulation.

    Returns (sample_counts, running_equity), both of length `samples`.
    The last running value is exactly compute_equity() for the same inputs.
    """
    board = as_board(board)
    opponents = tuple(opponents)
    if isinstance(samples, bool) or not isinstance(samples, int) or samples <= 0:
        raise ConfigurationError(f"samples must be a positive integer, got {samples!r}")

    deck = Deck(available_cards(player, opponents, board), seed)
    shares = np.fromiter(
        iter_pot_shares(player, opponents, board, deck, samples, evaluator),
        dtype=np.float64,
        count=samples,
    )
    counts = np.arange(1, samples + 1)
    return counts, np.cumsum(shares) / counts
