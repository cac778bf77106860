from __future__ import annotations

from typing import Sequence

from .engine.equity import EquityResult
from .helpers.cards import Hand


def _label(hand: Hand, empty: str) -> str:
    return empty if hand.is_empty() else str(hand)


def format_numeric(equity: float) -> str:
    # whole values print without a trailing ".0", e.g. "1" and "0"
    if equity.is_integer():
        return str(int(equity))
    return str(equity)


def format_pretty(player: Hand, opponents: Sequence[Hand], board: Hand, equity: float) -> str:
    """e.g. "As Ah has 85.2% equity on preflop against 2c 7d." """
    player_label = _label(player, "Random hand")
    board_label = _label(board, "preflop")
    opp_labels = [_label(o, "random hand") for o in opponents]
    if len(opp_labels) > 1:
        against = f"[{', '.join(opp_labels)}]"
    else:
        against = opp_labels[0]
    return f"{player_label} has {equity * 100:.1f}% equity on {board_label} against {against}."


def format_performance(result: EquityResult) -> str:
    return f"{result.samples} samples in {result.elapsed_ms} ms - {result.samples_per_ms} samples/ms."
