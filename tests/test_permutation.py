import math
import random

import pytest

from tspgenetic.permutation import (
    inversion_pairs,
    inversion_weight,
    random_permutation,
    reverse_section,
    tour_weight,
)


def _euclidean(points):
    return [
        [round(math.hypot(ax - bx, ay - by)) for bx, by in points]
        for ax, ay in points
    ]


def _random_points(count, seed):
    rng = random.Random(seed)
    return [(rng.randint(0, 500), rng.randint(0, 500)) for _ in range(count)]


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_reverse_section_inclusive():
    perm = [0, 1, 2, 3, 4]
    reverse_section(perm, 1, 3)
    assert perm == [0, 3, 2, 1, 4]


def test_reverse_section_twice_is_identity():
    perm = list(range(9))
    reverse_section(perm, 2, 7)
    reverse_section(perm, 2, 7)
    assert perm == list(range(9))


def test_tour_weight_unit_square():
    assert tour_weight([0, 1, 2, 3], _euclidean(SQUARE)) == 4


def test_tour_weight_invariant_under_rotation_and_reversal():
    dist = _euclidean(_random_points(12, 1))
    perm = random_permutation(12, random.Random(3))
    weight = tour_weight(perm, dist)
    assert tour_weight(perm[5:] + perm[:5], dist) == weight
    assert tour_weight(perm[::-1], dist) == weight


def test_tour_weight_empty_raises():
    with pytest.raises(ValueError):
        tour_weight([], [[0]])


def test_inversion_weight_matches_full_recomputation():
    n = 10
    dist = _euclidean(_random_points(n, 7))
    perm = random_permutation(n, random.Random(11))
    weight = tour_weight(perm, dist)
    for i, j in inversion_pairs(n):
        moved = list(perm)
        reverse_section(moved, i, j)
        assert inversion_weight(weight, i, j, perm, dist) == tour_weight(moved, dist)


def test_inversion_weight_whole_tour_is_unchanged():
    dist = _euclidean(_random_points(6, 2))
    perm = list(range(6))
    weight = tour_weight(perm, dist)
    assert inversion_weight(weight, 0, 5, perm, dist) == weight


def test_random_permutation_is_permutation():
    perm = random_permutation(50, random.Random(5))
    assert sorted(perm) == list(range(50))


def test_random_permutation_reproducible_with_seed():
    first = random_permutation(30, random.Random(9))
    assert sorted(first) == list(range(30))
    assert random_permutation(30, random.Random(9)) == first


def test_random_permutation_depends_on_seed():
    results = {tuple(random_permutation(30, random.Random(seed))) for seed in range(5)}
    assert len(results) > 1


def test_inversion_pairs_bounds():
    pairs = inversion_pairs(7)
    assert pairs
    assert all(0 < i < j < 6 for i, j in pairs)
    assert (1, 5) in pairs
    assert len(set(pairs)) == len(pairs)


def test_inversion_pairs_too_small():
    assert inversion_pairs(3) == []