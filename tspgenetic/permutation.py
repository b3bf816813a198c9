"""Tour arithmetic over permutations of city indices."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from itertools import pairwise

Matrix = Sequence[Sequence[int]]


def reverse_section(perm: MutableSequence[int], i: int, j: int) -> None:
    """Reverse ``perm[i..j]`` (both ends inclusive) in place."""
    perm[i : j + 1] = perm[i : j + 1][::-1]


def tour_weight(perm: Sequence[int], distance: Matrix) -> int:
    """Length of the closed tour visiting cities in the order of ``perm``."""
    if not perm:
        raise ValueError("a tour needs at least one city")
    inner = sum(distance[b][a] for a, b in pairwise(perm))
    return inner + distance[perm[-1]][perm[0]]


def inversion_weight(
    weight: int, i: int, j: int, perm: Sequence[int], distance: Matrix
) -> int:
    """Tour length after reversing ``perm[i..j]``, given the current length.

    Only the two edges at the ends of the section change, so the result is
    found in constant time.  Assumes a symmetric distance matrix.
    """
    n = len(perm)
    if i == 0 and j == n - 1:
        return weight
    before = perm[i - 1]
    after = perm[(j + 1) % n]
    old = distance[before][perm[i]] + distance[perm[j]][after]
    new = distance[before][perm[j]] + distance[perm[i]][after]
    return weight - old + new


def random_permutation(n: int, rng=None) -> list[int]:
    """A uniformly random permutation of ``range(n)``.

    ``rng`` is anything with a ``shuffle`` method; the module generator is
    used when it is omitted.
    """
    perm = list(range(n))
    (rng if rng is not None else random).shuffle(perm)
    return perm


def inversion_pairs(n: int) -> list[tuple[int, int]]:
    """Section bounds ``(i, j)`` with ``0 < i < j < n - 1`` used as moves."""
    return [(i, j) for i in range(1, n) for j in range(i + 1, n - 1)]