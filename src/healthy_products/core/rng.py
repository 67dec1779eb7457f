from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    The game seeds one instance at startup (or per test) and hands it to the
    item generator, which is its only consumer.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def coin(self) -> bool:
        """Return True or False with equal probability."""
        return self._rng.random() < 0.5

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.randrange(len(seq))]
