"""7-bag randomizer module"""
import random
from typing import List, Optional

from tetris_piece import PIECE_TYPES


class SevenBag:
    """
    Deals the seven piece types in shuffled bags.

    Every bag holds each type exactly once and is refilled only when empty,
    so any 14 draws starting at a bag boundary contain every type twice and
    the same type can never appear more than twice in a row.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.bag: List[str] = []

    def _refill(self) -> None:
        self.bag = list(PIECE_TYPES)
        # Fisher-Yates, popping from the end
        for i in range(len(self.bag) - 1, 0, -1):
            j = self.rng.randint(0, i)
            self.bag[i], self.bag[j] = self.bag[j], self.bag[i]

    def next_piece(self) -> str:
        if not self.bag:
            self._refill()
        return self.bag.pop()

    def remaining(self) -> int:
        """Number of types left before the next refill."""
        return len(self.bag)
