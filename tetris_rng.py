"""Piece randomizer: uniform independent draws"""
import random
from typing import Optional
from tetris_piece import PIECE_TYPES


class UniformRandom:
    """Each draw is an independent uniform choice over the seven types.

    There is no bag and no repeat rejection, so the same type can come up
    any number of times in a row.
    """
    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
