"""Randomised 2-opt style improvement of a single tour."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from tspgenetic.permutation import inversion_weight, reverse_section, tour_weight
from tspgenetic.rng import RandomGenerator


def random_local_search(
    perm: MutableSequence[int],
    inversions: Sequence[tuple[int, int]],
    distance: Sequence[Sequence[int]],
    rng: RandomGenerator,
) -> int:
    """Improve ``perm`` in place by sampled section reversals.

    Each round samples ``len(perm)`` moves and applies the best one if it
    shortens the tour; the search stops after a round with no improvement.
    Returns the final tour length.
    """
    current = tour_weight(perm, distance)
    if not inversions:
        return current
    rounds = len(perm)
    while True:
        best = current
        best_move: tuple[int, int] | None = None
        for _ in range(rounds):
            i, j = inversions[rng.random_inversion()]
            candidate = inversion_weight(current, i, j, perm, distance)
            if candidate < best:
                best = candidate
                best_move = (i, j)
        if best_move is None:
            return current
        reverse_section(perm, *best_move)
        current = best