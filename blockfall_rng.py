
"""Uniform random source for shape and image picks"""
import random
from typing import Optional

class UniformRandom:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rand = random.Random(seed)

    def index(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return self._rand.randrange(n)
