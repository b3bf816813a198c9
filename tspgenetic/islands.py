"""Island model: several populations evolved apart, trading members between rounds."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from tspgenetic.genetic import BestTour, Person, genetic_algorithm
from tspgenetic.rng import RandomGenerator

NUM_ISLANDS = 5
EXCHANGE_ITERATIONS = 100


def exchange(
    islands: Sequence[MutableSequence[Person]], n: int, rng: RandomGenerator
) -> None:
    """Make ``n * n`` random swaps of members between islands.

    Each draw picks two member positions and two islands; when the islands
    differ the members trade places.  Islands are drawn from the first four
    only, so a fifth island keeps its members.
    """
    for _ in range(n * n):
        first = rng.random_island_person()
        second = rng.random_island_person()
        source = rng.random_island()
        target = rng.random_island()
        if source == target:
            continue
        islands[source][first], islands[target][second] = (
            islands[target][second],
            islands[source][first],
        )


def run_islands(
    distance: Sequence[Sequence[int]],
    generation: Sequence[Person],
    generation_size: int,
    parents_size: int,
    mutation_rate: float,
    crossover_rate: float,
    iterations: int,
    rng: RandomGenerator,
) -> BestTour:
    """Evolve ``generation`` split over five islands and return the best tour.

    Every round runs the genetic search on each island for
    ``EXCHANGE_ITERATIONS`` generations and then exchanges members.  The
    search ends once ``iterations`` rounds in a row bring no shorter tour.
    The caller's ``generation`` is left unchanged.
    """
    island_size = generation_size // NUM_ISLANDS
    if island_size < 1:
        raise ValueError(
            f"generation size {generation_size} is too small for {NUM_ISLANDS} islands"
        )
    island_parents = parents_size // NUM_ISLANDS
    rng.set_island_size(island_size)

    last = NUM_ISLANDS - 1
    islands = [
        list(generation[index * island_size : (index + 1) * island_size])
        for index in range(last)
    ]
    islands.append(list(generation[last * island_size :]))
    if any(not island for island in islands):
        raise ValueError("the generation is too small to populate every island")

    best = BestTour()
    stale = 0
    while stale < iterations:
        results = [
            genetic_algorithm(
                distance,
                island,
                island_size,
                island_parents,
                mutation_rate,
                crossover_rate,
                EXCHANGE_ITERATIONS,
                rng.spawn(),
            )
            for island in islands
        ]
        round_best = min(results, key=lambda result: result.weight)
        if round_best.weight < best.weight:
            best = BestTour(list(round_best.perm), round_best.weight)
            stale = 0
        stale += 1
        exchange(islands, len(distance), rng)
    return best