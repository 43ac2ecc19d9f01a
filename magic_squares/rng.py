"""Linear-congruential generator used to vary doubly-even squares.

Not suitable for anything security related: it only picks which of the
equally valid fill patterns a generation call uses.
"""
from __future__ import annotations

import time

_MASK64 = (1 << 64) - 1

# Knuth's MMIX constants, modulus 2**64.
MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407


class Lcg:
    """X(k+1) = (a * X(k) + c) mod 2**64."""

    def __init__(self, seed: int) -> None:
        self.state = int(seed) & _MASK64

    @classmethod
    def from_time(cls) -> "Lcg":
        """Seed from the wall clock in nanoseconds."""
        return cls(time.time_ns())

    def next_u32(self) -> int:
        """Advance the state and return its high 32 bits."""
        self.state = (self.state * MULTIPLIER + INCREMENT) & _MASK64
        return self.state >> 32

    def next_range(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi)``; ``lo`` when the range is empty."""
        span = hi - lo
        if span <= 0:
            return lo
        return lo + self.next_u32() % span

    def coin(self) -> bool:
        return self.next_range(0, 2) == 1
