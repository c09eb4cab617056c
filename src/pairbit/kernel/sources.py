"""
Kernel Component: Randomness Sources

Sampling takes its randomness as an explicit argument. A source is any
object with randrange(n) returning an int in [0, n); random.Random
qualifies. Sources hold state, so each caller owns its own instance.

LcgSource is a 32-bit linear congruential generator:
    seed = seed * 1103515245 + 12345  (mod 2^32)
with a zero seed replaced by 1. It is not cryptographic.
"""

from ..core.registry import LCG_MULTIPLIER, LCG_INCREMENT, LCG_MODULUS


class LcgSource:
    """Deterministic seedable source; identical seeds yield identical draws."""

    def __init__(self, seed: int):
        seed %= LCG_MODULUS
        self.state = seed if seed != 0 else 1

    def next_u32(self) -> int:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def next_u64(self) -> int:
        high = self.next_u32()
        return (high << 32) | self.next_u32()

    def getrandbits(self, k: int) -> int:
        """k random bits assembled from 32-bit words, most significant first."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        words = (k + 31) // 32
        bits = 0
        for _ in range(words):
            bits = (bits << 32) | self.next_u32()
        return bits >> (words * 32 - k)

    def randrange(self, n: int) -> int:
        """
        Uniform int in [0, n) by rejection sampling.

        Raises:
            ValueError: If n <= 0.
        """
        if n <= 0:
            raise ValueError(f"empty range for randrange({n})")
        k = n.bit_length()
        r = self.getrandbits(k)
        while r >= n:
            r = self.getrandbits(k)
        return r
