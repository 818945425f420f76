
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import PIECE_TYPES

class PieceRandom:
    PIECES = list(PIECE_TYPES)
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
