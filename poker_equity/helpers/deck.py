from __future__ import annotations
import random
from typing import Iterable, List

from .cards import Card
from .errors import InsufficientCards


class Deck:
    """
    The cards nobody can see yet, dealt without replacement.

    The card pool is sorted and then permuted once with a Random seeded from
    `seed`. Every deal draws with a partial Fisher-Yates step from the cards
    past the cursor, using the same Random for the lifetime of the deck, so
    `reset()` puts every card back without reseeding and successive trials
    see fresh, independent deals. Same pool + same seed + same call sequence
    gives the same cards.
    """

    def __init__(self, available: Iterable[Card], seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
        self._cards: List[Card] = sorted(set(available))
        self._rng.shuffle(self._cards)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._pos

    def reset(self) -> None:
        self._pos = 0

    def deal(self, n: int) -> List[Card]:
        if n < 0:
            raise ValueError("Cannot deal a negative number of cards")
        left = len(self._cards) - self._pos
        if n > left:
            raise InsufficientCards(n, left)

        cards = self._cards
        rng = self._rng
        start, end = self._pos, self._pos + n
        for i in range(start, end):
            j = rng.randrange(i, len(cards))
            cards[i], cards[j] = cards[j], cards[i]
        self._pos = end
        return cards[start:end]
