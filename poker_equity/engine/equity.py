from __future__ import annotations

import time
from dataclasses import dataclass
from multiprocessing import Pool
from typing import Iterator, List, Optional, Sequence, Tuple

from ..helpers.cards import BOARD_CAPACITY, HOLE_CAPACITY, Card, Hand, make_deck
from ..helpers.deck import Deck
from ..helpers.errors import ConfigurationError, InsufficientCards
from ..helpers.evaluator import Evaluator, rank
from ..logging_utils import get_logger

log = get_logger(__name__)

DEFAULT_SAMPLES = 100_000
DEFAULT_SEED = 42

# hole cards + board
EVAL_CAPACITY = HOLE_CAPACITY + BOARD_CAPACITY

WIN, TIE, LOSS = 1.0, 0.5, 0.0


@dataclass(slots=True)
class EquityResult:
    """
    Pot-share tally of a finished simulation.
    A win counts 1.0 of the pot, a tie (split pot) 0.5, a loss nothing.
    """
    samples: int = 0
    wins: int = 0
    ties: int = 0
    losses: int = 0
    elapsed: float = 0.0  # seconds

    def record(self, share: float) -> None:
        self.samples += 1
        if share == WIN:
            self.wins += 1
        elif share == TIE:
            self.ties += 1
        else:
            self.losses += 1

    @property
    def pots_won(self) -> float:
        return self.wins + 0.5 * self.ties

    @property
    def equity(self) -> float:
        if self.samples == 0:
            raise ValueError("No samples recorded")
        return self.pots_won / self.samples

    @property
    def elapsed_ms(self) -> int:
        # sub-millisecond runs count as 1 ms
        return max(1, int(self.elapsed * 1000))

    @property
    def samples_per_ms(self) -> int:
        return self.samples // self.elapsed_ms

    def merge(self, other: "EquityResult") -> "EquityResult":
        return EquityResult(
            samples=self.samples + other.samples,
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            losses=self.losses + other.losses,
            elapsed=max(self.elapsed, other.elapsed),
        )


def as_board(board: Optional[Hand]) -> Hand:
    """
    The board with board capacity. None, or any hand of at most five cards
    (a plain Hand() included), is accepted.
    """
    if board is None:
        return Hand((), BOARD_CAPACITY)
    if len(board) > BOARD_CAPACITY:
        raise ConfigurationError(f"Board: maximum {BOARD_CAPACITY} cards allowed")
    if board.capacity == BOARD_CAPACITY:
        return board
    return Hand(board.cards, BOARD_CAPACITY)


def available_cards(
    player: Hand,
    opponents: Sequence[Hand],
    board: Hand,
    allow_shared_cards: bool = False,
) -> List[Card]:
    """
    Validate a deal and return the cards left for sampling.

    Raises ConfigurationError for oversize hands, a missing opponent or a card
    fixed in two roles, and InsufficientCards when the unseen cards cannot
    complete every hand and the board.
    """
    if not opponents:
        raise ConfigurationError("At least one opponent is required")
    if len(player) > HOLE_CAPACITY:
        raise ConfigurationError(f"Player hand: maximum {HOLE_CAPACITY} cards allowed")
    for i, opp in enumerate(opponents):
        if len(opp) > HOLE_CAPACITY:
            raise ConfigurationError(f"Opponent {i + 1}: maximum {HOLE_CAPACITY} cards allowed")
    if len(board) > BOARD_CAPACITY:
        raise ConfigurationError(f"Board: maximum {BOARD_CAPACITY} cards allowed")

    # allow_shared_cards only lets a complete hole hand be repeated verbatim
    hands: List[Hand] = []
    for h in (player, *opponents):
        if allow_shared_cards and len(h) == HOLE_CAPACITY and h in hands:
            continue
        hands.append(h)
    fixed = [c for h in hands for c in h] + list(board)
    dead = set(fixed)
    dupes: List[Card] = []
    seen = set()
    for c in fixed:
        if c in seen and c not in dupes:
            dupes.append(c)
        seen.add(c)
    if dupes:
        raise ConfigurationError(
            "Card assigned more than once: " + " ".join(str(c) for c in dupes)
        )

    remaining = make_deck(exclude=dead)
    needed = (
        (BOARD_CAPACITY - len(board))
        + (HOLE_CAPACITY - len(player))
        + sum(HOLE_CAPACITY - len(opp) for opp in opponents)
    )
    if needed > len(remaining):
        raise InsufficientCards(needed, len(remaining))
    return remaining


def iter_pot_shares(
    player: Hand,
    opponents: Sequence[Hand],
    board: Hand,
    deck: Deck,
    samples: int,
    evaluator: Evaluator = rank,
) -> Iterator[float]:
    """
    Yield the player's pot share for each of `samples` trials.

    Each trial deals from one deck cursor in a fixed order: the board first,
    then the player, then every opponent in input order. The player is
    compared against the best opponent only.
    """
    board_missing = BOARD_CAPACITY - len(board)
    player_missing = HOLE_CAPACITY - len(player)
    opp_missing = [HOLE_CAPACITY - len(opp) for opp in opponents]

    for _ in range(samples):
        deck.reset()
        complete_board = board.extend(deck.deal(board_missing), BOARD_CAPACITY)
        hole = player.extend(deck.deal(player_missing), HOLE_CAPACITY) if player_missing else player

        best_opp = None
        for opp, missing in zip(opponents, opp_missing):
            if missing:
                opp = opp.extend(deck.deal(missing), HOLE_CAPACITY)
            opp_rank = evaluator(opp.extend(complete_board, EVAL_CAPACITY).cards)
            if best_opp is None or opp_rank > best_opp:
                best_opp = opp_rank

        player_rank = evaluator(hole.extend(complete_board, EVAL_CAPACITY).cards)
        if player_rank > best_opp:
            yield WIN
        elif player_rank < best_opp:
            yield LOSS
        else:
            yield TIE


def _run_chunk(
    player: Hand,
    opponents: Tuple[Hand, ...],
    board: Hand,
    cards: List[Card],
    samples: int,
    seed: int,
    evaluator: Evaluator,
) -> EquityResult:
    start = time.perf_counter()
    deck = Deck(cards, seed)
    result = EquityResult()
    for share in iter_pot_shares(player, opponents, board, deck, samples, evaluator):
        result.record(share)
    result.elapsed = time.perf_counter() - start
    return result


def chunk_sizes(samples: int, workers: int) -> List[int]:
    """Split `samples` into `workers` parts; earlier parts take the remainder."""
    base, extra = divmod(samples, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def simulate(
    player: Hand,
    opponents: Sequence[Hand],
    board: Optional[Hand] = None,
    samples: int = DEFAULT_SAMPLES,
    seed: int = DEFAULT_SEED,
    *,
    evaluator: Evaluator = rank,
    workers: int = 1,
    allow_shared_cards: bool = False,
) -> EquityResult:
    """
    Monte Carlo equity of `player` against `opponents` on `board`.

    Empty (or partial) hands are completed at random every trial. With
    allow_shared_cards a complete two-card hole hand may appear more than once
    (a player mirrored as an opponent); any other overlap is still rejected.

    With workers > 1 the trials are split into chunks; chunk i deals from its own
    deck seeded with `seed ^ i` in a separate process, so a given
    (seed, workers) pair always gives the same answer and workers=1 matches
    the sequential run exactly.
    """
    board = as_board(board)
    opponents = tuple(opponents)

    if isinstance(samples, bool) or not isinstance(samples, int) or samples <= 0:
        raise ConfigurationError(f"samples must be a positive integer, got {samples!r}")
    if isinstance(workers, bool) or not isinstance(workers, int) or workers <= 0:
        raise ConfigurationError(f"workers must be a positive integer, got {workers!r}")

    cards = available_cards(player, opponents, board, allow_shared_cards)
    log.debug(
        "equity: player=%r opponents=%r board=%r samples=%d seed=%d deck=%d",
        str(player), [str(o) for o in opponents], str(board), samples, seed, len(cards),
    )

    start = time.perf_counter()
    if workers == 1:
        result = _run_chunk(player, opponents, board, cards, samples, seed, evaluator)
    else:
        jobs = [
            (player, opponents, board, cards, n, seed ^ i, evaluator)
            for i, n in enumerate(chunk_sizes(samples, workers))
            if n > 0
        ]
        log.info("equity: %d samples over %d worker chunks", samples, len(jobs))
        with Pool(len(jobs)) as pool:
            parts = pool.starmap(_run_chunk, jobs)
        result = EquityResult()
        for part in parts:
            result = result.merge(part)
    result.elapsed = time.perf_counter() - start

    log.debug(
        "equity: %.6f (w=%d t=%d l=%d) in %d ms",
        result.equity, result.wins, result.ties, result.losses, result.elapsed_ms,
    )
    return result


def compute_equity(
    player: Hand,
    opponents: Sequence[Hand],
    board: Optional[Hand] = None,
    samples: int = DEFAULT_SAMPLES,
    seed: int = DEFAULT_SEED,
    *,
    evaluator: Evaluator = rank,
    workers: int = 1,
    allow_shared_cards: bool = False,
) -> float:
    return simulate(
        player,
        opponents,
        board,
        samples,
        seed,
        evaluator=evaluator,
        workers=workers,
        allow_shared_cards=allow_shared_cards,
    ).equity
