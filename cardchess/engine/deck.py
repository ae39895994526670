from __future__ import annotations

import random
from typing import TYPE_CHECKING

from ..models.cards import Card

if TYPE_CHECKING:
    from ..models.config import CardsConfig


class Deck:
    def __init__(self, config: CardsConfig, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        pool: list[Card] = []
        for d in config.cards:
            for _ in range(d.frequency):
                pool.append(Card.from_def(d))
        self._cards = self._shuffle(pool)

    def _shuffle(self, cards: list[Card]) -> list[Card]:
        # Fisher-Yates; every permutation equally likely
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        return cards

    def draw(self, count: int = 1) -> list[Card]:
        drawn: list[Card] = []
        for _ in range(count):
            if not self._cards:
                break
            drawn.append(self._cards.pop())
        return drawn

    def remaining(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards
