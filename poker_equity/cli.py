from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from .config import OUTPUT_MODES, EquityConfig
from .engine.equity import DEFAULT_SAMPLES, DEFAULT_SEED
from .helpers.cards import BOARD_CAPACITY, HOLE_CAPACITY, Hand, parse_cards, parse_hand
from .helpers.errors import ConfigurationError, ParseError
from .logging_utils import get_logger, setup_logging
from .report import format_numeric, format_performance, format_pretty

log = get_logger(__name__)

CARDS_HELP = """\
<CARDS> examples:
"As 3c": Ace of spades and three of clubs.
"Qd Th": Queen of diamonds and 10 of hearts.
"""


def _hand_type(capacity: int) -> Callable[[str], Hand]:
    def parse(text: str) -> Hand:
        try:
            parse_cards(text.split())
        except ParseError:
            raise argparse.ArgumentTypeError(f"Unable to parse {text}")
        try:
            return parse_hand(text, capacity)
        except ParseError as e:
            raise argparse.ArgumentTypeError(str(e))
    return parse


def _positive_int(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def _non_negative_int(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-equity",
        description="Monte Carlo equity of a Texas Hold'em hand.",
        epilog=CARDS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-p", "--player", "--hero", metavar="CARDS",
                        type=_hand_type(HOLE_CAPACITY), help="Player hand")
    parser.add_argument("-o", "--opponent", "--villain", metavar="CARDS", action="append",
                        type=_hand_type(HOLE_CAPACITY), help="Opponent hand (repeatable)")
    parser.add_argument("-u", "--unknown-opponents", type=_non_negative_int, default=0,
                        help="Unknown (random) opponents")
    parser.add_argument("-b", "--board", metavar="CARDS",
                        type=_hand_type(BOARD_CAPACITY), help="Board cards")
    parser.add_argument("--samples", type=_positive_int, default=DEFAULT_SAMPLES,
                        help="Number of iterations")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument("--workers", type=_positive_int, default=1,
                        help="Worker processes to split the samples over")
    parser.add_argument("--output", choices=OUTPUT_MODES, default="pretty", help="Output style")
    parser.add_argument("--performance", action="store_true", help="Show performance stats")
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"),
                        type=str.upper, default=None, help="Logging level (default: $LOG_LEVEL)")
    return parser


def config_from_args(args: argparse.Namespace) -> EquityConfig:
    return EquityConfig.build(
        player=args.player,
        opponents=args.opponent,
        unknown_opponents=args.unknown_opponents,
        board=args.board,
        samples=args.samples,
        seed=args.seed,
        workers=args.workers,
        output=args.output,
        performance=args.performance,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    cfg = config_from_args(args)

    try:
        result = cfg.run()
    except ConfigurationError as e:
        log.debug("equity computation rejected", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if cfg.performance:
        print(format_performance(result), file=sys.stderr)

    if cfg.output == "numeric":
        print(format_numeric(result.equity))
    else:
        print(format_pretty(cfg.player, cfg.opponents, cfg.board, result.equity))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
