from .equity import (
    DEFAULT_SAMPLES,
    DEFAULT_SEED,
    EquityResult,
    as_board,
    available_cards,
    chunk_sizes,
    compute_equity,
    iter_pot_shares,
    simulate,
)
from .convergence import convergence_curve

__all__ = [
    "DEFAULT_SAMPLES",
    "DEFAULT_SEED",
    "EquityResult",
    "as_board",
    "available_cards",
    "chunk_sizes",
    "compute_equity",
    "iter_pot_shares",
    "simulate",
    "convergence_curve",
]
