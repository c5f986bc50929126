"""Random helpers."""

from __future__ import annotations
import random
from typing import Optional


class FastBoolGenerator:
    """Very fast random booleans, handed out one bit at a time.

    Draws one 64-bit word from its own Mersenne Twister and returns its bits
    lowest first, refilling every 64 calls.

    Usage:
        gen = FastBoolGenerator()
        coin = gen()
    """

    WORD_BITS = 64

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._word = 0
        self._remaining = 0

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed and discard any buffered bits."""
        self._rng.seed(seed)
        self._remaining = 0

    def __call__(self) -> bool:
        if self._remaining == 0:
            self._word = self._rng.getrandbits(self.WORD_BITS)
            self._remaining = self.WORD_BITS
        value = bool(self._word & 1)
        self._word >>= 1
        self._remaining -= 1
        return value
