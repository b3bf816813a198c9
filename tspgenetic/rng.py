"""Random source shared by the genetic search and its helpers."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any

_MAX_AGE = 50
_MAX_ISLAND = 3


class RandomGenerator:
    """Seeded generator with the draws the search needs."""

    def __init__(
        self, n: int, generation_size: int, inversions: int, seed: Any = None
    ) -> None:
        self.n = n
        self.generation_size = generation_size
        self.inversions = inversions
        self.k: int | None = None
        self.island_size: int | None = None
        self._random = random.Random(seed)

    def _draw(self, upper: int) -> int:
        if upper < 0:
            raise ValueError(f"empty range 0..{upper}")
        return self._random.randint(0, upper)

    def random_inversion(self) -> int:
        """Index into the list of inversion moves."""
        return self._draw(self.inversions - 1)

    def random_person(self) -> int:
        """Index of a member of the whole generation."""
        return self._draw(self.generation_size - 1)

    def random_island_person(self) -> int:
        """Index of a member of one island's population."""
        if self.island_size is None:
            raise RuntimeError("island size has not been set")
        return self._draw(self.island_size - 1)

    def random_island(self) -> int:
        """Index of an island, from 0 to 3."""
        return self._draw(_MAX_ISLAND)

    def random_point(self) -> int:
        """Position in a tour."""
        return self._draw(self.n - 1)

    def real(self) -> float:
        """Uniform float in [0, 1)."""
        return self._random.random()

    def set_k(self, k: int) -> None:
        """Fix the section length used by :meth:`random_k`."""
        self.k = k

    def random_k(self) -> int:
        """Start of a section of length ``k`` that fits in the tour."""
        if self.k is None:
            raise RuntimeError("k has not been set")
        return self._draw(self.n - self.k)

    def set_island_size(self, island_size: int) -> None:
        """Fix the population size used by :meth:`random_island_person`."""
        self.island_size = island_size

    def random_age(self) -> int:
        """Age of a new individual, from 0 to 50."""
        return self._draw(_MAX_AGE)

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place."""
        self._random.shuffle(items)

    def spawn(self) -> RandomGenerator:
        """An independent generator with the same settings, seeded from this one."""
        child = RandomGenerator(
            self.n,
            self.generation_size,
            self.inversions,
            seed=self._random.getrandbits(64),
        )
        child.k = self.k
        child.island_size = self.island_size
        return child