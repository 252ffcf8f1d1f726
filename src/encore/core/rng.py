"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import secrets
from random import Random

_MAX_RANDOM_SEED = 2**31 - 1


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = Random(seed)

    @classmethod
    def from_entropy(cls) -> "RNG":
        """Return an RNG seeded from the operating system's entropy pool."""
        return cls(secrets.randbelow(_MAX_RANDOM_SEED))

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)
