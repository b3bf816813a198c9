"""Genetic search for short tours: selection, crossover, mutation and the main loop."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from enum import Enum

from tspgenetic.graph import MST
from tspgenetic.local_search import random_local_search
from tspgenetic.permutation import (
    inversion_pairs,
    random_permutation,
    reverse_section,
    tour_weight,
)
from tspgenetic.rng import RandomGenerator

Matrix = Sequence[Sequence[int]]

_FIXED_TOURNAMENT_SIZE = 20
_MST_SEED_CHANCE = 0.7


@dataclass
class Person:
    """One individual: a tour, its length, its selection weight and its age."""

    genotype: list[int]
    phenotype: int
    probability: float = 0.0
    age: int = 0

    def __lt__(self, other: Person) -> bool:
        return self.genotype < other.genotype


class SelectOption(Enum):
    """Ways of choosing pairs of parents."""

    ROULETTE = "roulette"
    TOURNAMENT = "tournament"
    RANDOM = "random"


@dataclass
class BestTour:
    """Shortest tour seen so far."""

    perm: list[int] = field(default_factory=list)
    weight: float = math.inf


def _person(genotype: list[int], distance: Matrix, age: int = 0) -> Person:
    return Person(genotype, tour_weight(genotype, distance), age=age)


def evaluate_generation(generation: Sequence[Person], best: BestTour) -> BestTour:
    """Record any tour shorter than ``best`` and set selection probabilities.

    A member's probability is ``best.weight / phenotype``, so the best tour
    gets 1 and longer tours proportionally less.
    """
    for person in generation:
        if person.phenotype < best.weight:
            best.weight = person.phenotype
            best.perm = list(person.genotype)
    for person in generation:
        person.probability = (
            best.weight / person.phenotype if person.phenotype else 1.0
        )
    return best


def _roulette_index(
    generation: Sequence[Person], start: int, rng: RandomGenerator
) -> int:
    target = rng.real()
    total = 0.0
    j = start
    while total < target and j < len(generation):
        total += generation[j].probability
        j += 1
    return j


def roulette(generation: Sequence[Person], rng: RandomGenerator) -> tuple[Person, Person]:
    """Pick two parents by accumulating probabilities up to random targets.

    The second scan continues from where the first one stopped, so the
    second parent never precedes the first in ``generation``.
    """
    if not generation:
        raise ValueError("cannot select from an empty generation")
    j = _roulette_index(generation, 0, rng)
    first = max(j - 1, 0)
    j = _roulette_index(generation, j, rng)
    second = max(j - 1, 0)
    return generation[first], generation[second]


def _run_tournament(
    generation: Sequence[Person], size: int, rng: RandomGenerator
) -> tuple[Person, Person]:
    if size < 2:
        raise ValueError(f"a tournament needs at least 2 entrants, got {size}")
    entrants = [generation[rng.random_person()] for _ in range(size)]
    entrants.sort(key=lambda person: person.phenotype)
    return entrants[0], entrants[1]


def tournament(
    generation: Sequence[Person], count: int, rng: RandomGenerator
) -> tuple[Person, Person]:
    """The two shortest tours among ``count // 2`` randomly drawn members."""
    return _run_tournament(generation, count // 2, rng)


def select_parents(
    generation: Sequence[Person],
    count: int,
    option: SelectOption,
    rng: RandomGenerator,
) -> list[tuple[Person, Person]]:
    """Choose ``count`` pairs of parents with the given method."""
    option = SelectOption(option)
    pairs: list[tuple[Person, Person]] = []
    while len(pairs) < count:
        if option is SelectOption.ROULETTE:
            pairs.append(roulette(generation, rng))
        elif option is SelectOption.TOURNAMENT:
            pairs.append(_run_tournament(generation, _FIXED_TOURNAMENT_SIZE, rng))
        else:
            first = generation[rng.random_person()]
            second = generation[rng.random_person()]
            pairs.append((first, second))
    return pairs


def mutate(
    generation: Sequence[Person],
    mutation_rate: float,
    inversions: Sequence[tuple[int, int]],
    distance: Matrix,
    rng: RandomGenerator,
) -> None:
    """Mutate members in place with probability ``mutation_rate`` each.

    A mutation picks a random move ``(i, j)`` and either reverses the
    section between them or swaps the two cities, with equal chance.
    """
    for person in generation:
        if rng.real() >= mutation_rate:
            continue
        i, j = inversions[rng.random_inversion()]
        genes = person.genotype
        if rng.real() < 0.5:
            reverse_section(genes, i, j)
        else:
            genes[i], genes[j] = genes[j], genes[i]
        person.phenotype = tour_weight(genes, distance)


def point_crossover(
    parent1: Person, parent2: Person, k: int, distance: Matrix
) -> Person:
    """Child taking ``parent1``'s first ``k`` cities, then the rest in ``parent2``'s order."""
    head = parent1.genotype[:k]
    used = set(head)
    genes = head + [v for v in parent2.genotype if v not in used]
    return _person(genes, distance)


def two_point_crossover(
    parent1: Person, parent2: Person, k: int, l: int, distance: Matrix
) -> Person:
    """Child keeping ``parent1`` outside ``k..l``; the gap is filled in ``parent2``'s order."""
    n = len(parent1.genotype)
    genes: list[int | None] = [None] * n
    used: set[int] = set()
    for index in (*range(k), *range(l + 1, n)):
        value = parent1.genotype[index]
        genes[index] = value
        used.add(value)
    free = (index for index, value in enumerate(genes) if value is None)
    for value in parent2.genotype:
        if value not in used:
            genes[next(free)] = value
    return _person(genes, distance)


def generate_first_generation(
    random_gen: bool,
    generation_size: int,
    mst: MST,
    distance: Matrix,
    rng: RandomGenerator,
) -> list[Person]:
    """Initial population, shuffled.

    With ``random_gen`` every member is a random tour.  Otherwise each step
    adds a random tour and, for the first ``n`` steps, with chance 0.7 also
    a depth-first walk of the spanning tree from that step's vertex; the
    result may then hold one member more than ``generation_size``.
    """
    n = len(distance)
    generation: list[Person] = []
    if random_gen:
        while len(generation) < generation_size:
            generation.append(
                _person(random_permutation(n, rng), distance, rng.random_age())
            )
    else:
        root = 0
        while len(generation) < generation_size:
            if root < n and rng.real() < _MST_SEED_CHANCE:
                generation.append(_person(mst.dfs(root), distance, rng.random_age()))
            generation.append(
                _person(random_permutation(n, rng), distance, rng.random_age())
            )
            root += 1
    rng.shuffle(generation)
    return generation


def _crossover_points(rng: RandomGenerator) -> tuple[int, int]:
    k = rng.random_point()
    l = rng.random_point()
    while k == l:
        l = rng.random_point()
    return (k, l) if k < l else (l, k)


def genetic_algorithm(
    distance: Matrix,
    generation: MutableSequence[Person],
    generation_size: int,
    parents_size: int,
    mutation_rate: float,
    crossover_rate: float,
    iterations: int,
    rng: RandomGenerator,
) -> BestTour:
    """Evolve ``generation`` in place for ``iterations`` rounds.

    Each round breeds children by roulette selection and one-point
    crossover, mutates everyone, keeps the ``generation_size`` shortest
    tours and polishes them with local search.  Returns the best tour seen.
    """
    if not generation:
        raise ValueError("the generation is empty")
    inversions = inversion_pairs(len(distance))

    generation.sort(key=lambda person: person.phenotype)
    best = BestTour(list(generation[0].genotype), generation[0].phenotype)
    evaluate_generation(generation, best)

    for _ in range(iterations):
        children: list[Person] = []
        for _ in range(parents_size):
            if rng.real() >= crossover_rate:
                continue
            first, second = roulette(generation, rng)
            k, _l = _crossover_points(rng)
            child1 = point_crossover(first, second, k, distance)
            child2 = point_crossover(second, first, k, distance)
            child1.age = rng.random_age()
            child2.age = rng.random_age()
            children += (child1, child2)
        generation.extend(children)

        mutate(generation, mutation_rate, inversions, distance, rng)

        generation.sort(key=lambda person: person.phenotype)
        del generation[generation_size:]

        for person in generation:
            person.phenotype = random_local_search(
                person.genotype, inversions, distance, rng
            )

        evaluate_generation(generation, best)

    return best