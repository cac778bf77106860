from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .engine.equity import DEFAULT_SAMPLES, DEFAULT_SEED, EquityResult, simulate
from .helpers.cards import BOARD_CAPACITY, Hand

OUTPUT_MODES = ("pretty", "numeric")


@dataclass(frozen=True)
class EquityConfig:
    """
    One equity question, as collected from the command line.
    An empty hand stands for a fully random one.
    """
    player: Hand = Hand()
    opponents: Tuple[Hand, ...] = (Hand(),)
    board: Hand = Hand((), BOARD_CAPACITY)
    samples: int = DEFAULT_SAMPLES
    seed: int = DEFAULT_SEED
    workers: int = 1
    output: str = "pretty"
    performance: bool = False

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_MODES:
            raise ValueError(f"output must be one of {OUTPUT_MODES}, got {self.output!r}")

    @classmethod
    def build(
        cls,
        player: Optional[Hand] = None,
        opponents: Optional[Sequence[Hand]] = None,
        unknown_opponents: int = 0,
        board: Optional[Hand] = None,
        **kwargs,
    ) -> "EquityConfig":
        """Known opponents first, then `unknown_opponents` random ones; one random if none given."""
        opps = list(opponents) if opponents else [Hand()]
        opps.extend(Hand() for _ in range(max(0, unknown_opponents)))
        return cls(
            player=player if player is not None else Hand(),
            opponents=tuple(opps),
            board=board if board is not None else Hand((), BOARD_CAPACITY),
            **kwargs,
        )

    def run(self) -> EquityResult:
        return simulate(
            self.player,
            self.opponents,
            self.board,
            self.samples,
            self.seed,
            workers=self.workers,
        )
