"""
Seeded PRNG (rng.py)
====================
Mulberry32: a 32-bit state generator producing floats in [0, 1).

The draw sequence must match the browser implementation bit for bit, so every
intermediate step is reduced to unsigned 32 bits the same way the JavaScript
``| 0``, ``>>>`` and ``Math.imul`` operators do.
"""

from dataclasses import dataclass
from typing import Sequence, TypeVar

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_32 = 4294967296.0

T = TypeVar("T")


@dataclass
class Mulberry32:
    """A single advancing stream. One instance per generation call."""
    state: int

    def __post_init__(self):
        # Signed and unsigned seeds with the same bit pattern are the same stream.
        self.state = int(self.state) & MASK32

    def next_float(self) -> float:
        self.state = (self.state + INCREMENT) & MASK32
        s = self.state
        t = ((s ^ (s >> 15)) * (s | 1)) & MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & MASK32)) & MASK32) ^ t
        return ((t ^ (t >> 14)) & MASK32) / TWO_32

    __call__ = next_float

    def index(self, n: int) -> int:
        """floor(draw * n), the way the browser picks list entries."""
        return int(self.next_float() * n)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.index(len(items))]


def make_rng(seed: int) -> Mulberry32:
    return Mulberry32(seed)
