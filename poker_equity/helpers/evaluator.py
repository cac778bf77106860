from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .cards import Card

CATEGORY = {
    "high_card": 0,
    "pair": 1,
    "two_pair": 2,
    "trips": 3,
    "straight": 4,
    "flush": 5,
    "full_house": 6,
    "quads": 7,
    "straight_flush": 8,
}
CATEGORY_NAME = {v: k for k, v in CATEGORY.items()}

# (category, tiebreak values); plain tuple comparison gives the total order.
Rank = Tuple[int, Tuple[int, ...]]

# Anything mapping 5..7 cards to a totally ordered value, higher is better.
Evaluator = Callable[[Sequence[Card]], Any]


def straight_high(values: Sequence[int]) -> Optional[int]:
    uniq = sorted(set(values), reverse=True)
    if 14 in uniq:
        uniq.append(1)  # ace low
    run = 1
    for i in range(len(uniq) - 1):
        if uniq[i] - 1 == uniq[i + 1]:
            run += 1
            if run >= 5:
                # values are descending, so the first run found is the highest
                return uniq[i - (run - 2)]
        else:
            run = 1
    return None


def rank(cards: Sequence[Card]) -> Rank:
    """
    Rank the best five-card poker hand among 5..7 distinct cards.

    Works on rank counts and per-suit values directly instead of trying all
    21 five-card subsets of a 7-card hand.
    """
    n = len(cards)
    if not (5 <= n <= 7):
        raise ValueError(f"rank expects 5..7 cards, got {n}")

    by_suit: Dict[str, List[int]] = {}
    counts: Dict[int, int] = {}
    for c in cards:
        by_suit.setdefault(c.suit, []).append(c.val)
        counts[c.val] = counts.get(c.val, 0) + 1

    flush_vals: Optional[List[int]] = None
    for vals in by_suit.values():
        if len(vals) >= 5:
            flush_vals = sorted(vals, reverse=True)
            break

    if flush_vals is not None:
        sf = straight_high(flush_vals)
        if sf is not None:
            return CATEGORY["straight_flush"], (sf,)

    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    quads = [v for v, k in groups if k == 4]
    trips = [v for v, k in groups if k == 3]
    pairs = [v for v, k in groups if k == 2]
    distinct = sorted(counts, reverse=True)

    if quads:
        quad = quads[0]
        kicker = max(v for v in distinct if v != quad)
        return CATEGORY["quads"], (quad, kicker)
    if trips and (len(trips) > 1 or pairs):
        return CATEGORY["full_house"], (trips[0], max(trips[1:] + pairs))
    if flush_vals is not None:
        return CATEGORY["flush"], tuple(flush_vals[:5])

    sh = straight_high(distinct)
    if sh is not None:
        return CATEGORY["straight"], (sh,)
    if trips:
        kickers = [v for v in distinct if v != trips[0]][:2]
        return CATEGORY["trips"], (trips[0], *kickers)
    if len(pairs) >= 2:
        pair_hi, pair_lo = pairs[0], pairs[1]
        kicker = max(v for v in distinct if v != pair_hi and v != pair_lo)
        return CATEGORY["two_pair"], (pair_hi, pair_lo, kicker)
    if pairs:
        kickers = [v for v in distinct if v != pairs[0]][:3]
        return CATEGORY["pair"], (pairs[0], *kickers)
    return CATEGORY["high_card"], tuple(distinct[:5])


def hand_category(r: Rank) -> str:
    return CATEGORY_NAME[r[0]]
