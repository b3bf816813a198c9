"""Command line: solve TSPLIB instances with the island genetic search."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tspgenetic.genetic import generate_first_generation
from tspgenetic.graph import MST
from tspgenetic.islands import run_islands
from tspgenetic.permutation import inversion_pairs, tour_weight
from tspgenetic.rng import RandomGenerator
from tspgenetic.tsplib import TspFormatError, distance_matrix, read_coordinates

DEFAULT_RUNS = 5
LARGE_INSTANCE_RUNS = 2
LARGE_INSTANCE = 1000
MIN_CITIES = 4

OPTION_FILES: dict[int, tuple[str, ...]] = {
    0: (
        "xqf131.tsp",
        "xqg237.tsp",
        "pma343.tsp",
        "pka379.tsp",
        "bcl380.tsp",
        "pbl395.tsp",
        "pbk411.tsp",
        "pbn423.tsp",
        "pbm436.tsp",
        "xql662.tsp",
    ),
    1: ("xit1083.tsp",),
    2: ("dcb2086.tsp",),
    3: ("pds2566.tsp",),
    4: ("icw1483.tsp",),
    5: ("djc1785.tsp",),
}


@dataclass
class RunSummary:
    """Tour lengths found by repeated runs on one instance."""

    name: str
    weights: list[int] = field(default_factory=list)

    @property
    def best(self) -> int:
        return min(self.weights)

    @property
    def average(self) -> float:
        return sum(self.weights) / len(self.weights)


def process_file(
    path: str | os.PathLike[str],
    runs: int | None = None,
    iterations: int = 100,
    generation_size: int = 400,
    parents_size: int = 200,
    mutation_rate: float = 0.1,
    crossover_rate: float = 0.8,
    seed: int | None = None,
) -> RunSummary:
    """Run the island search ``runs`` times on the instance at ``path``.

    Without ``runs``, instances above 1000 cities get 2 runs and smaller
    ones 5.
    """
    points = read_coordinates(path)
    n = len(points)
    if n < MIN_CITIES:
        raise TspFormatError(f"need at least {MIN_CITIES} cities, found {n}")
    if runs is None:
        runs = LARGE_INSTANCE_RUNS if n > LARGE_INSTANCE else DEFAULT_RUNS
    if runs < 1:
        raise ValueError(f"runs must be positive, got {runs}")

    distance = distance_matrix(points)
    move_count = len(inversion_pairs(n))
    mst = MST(distance, 0)
    seeds = random.Random(seed)

    summary = RunSummary(Path(path).name)
    for _ in range(runs):
        rng = RandomGenerator(
            n, generation_size, move_count, seed=seeds.getrandbits(64)
        )
        generation = generate_first_generation(
            False, generation_size, mst, distance, rng
        )
        best = run_islands(
            distance,
            generation,
            generation_size,
            parents_size,
            mutation_rate,
            crossover_rate,
            iterations,
            rng,
        )
        summary.weights.append(tour_weight(best.perm, distance))
    mst.clear()
    return summary


def format_summary(summary: RunSummary) -> str:
    """One LaTeX table row: name, best length and average length."""
    return f"{summary.name} & & {summary.best} & {summary.average:.3f} \\\\\\hline"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tspgenetic",
        description="Solve TSPLIB instances with an island genetic algorithm.",
    )
    parser.add_argument(
        "option",
        type=int,
        help="instance set: 0 small ones, 1-5 a single large one",
    )
    parser.add_argument("--dir", default="testy", help="directory holding the instances")
    parser.add_argument("--runs", type=int, default=None)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--generation-size", type=int, default=400)
    parser.add_argument("--parents-size", type=int, default=200)
    parser.add_argument("--mutation-rate", type=float, default=0.1)
    parser.add_argument("--crossover-rate", type=float, default=0.8)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen instance set and print one summary row per instance."""
    args = _parser().parse_args(argv)
    for name in OPTION_FILES.get(args.option, ()):
        path = Path(args.dir) / name
        try:
            summary = process_file(
                path,
                runs=args.runs,
                iterations=args.iterations,
                generation_size=args.generation_size,
                parents_size=args.parents_size,
                mutation_rate=args.mutation_rate,
                crossover_rate=args.crossover_rate,
                seed=args.seed,
            )
        except (OSError, ValueError) as error:
            print(f"Cannot process file {path}: {error}", file=sys.stderr)
            return 1
        for index, weight in enumerate(summary.weights):
            print(index, weight)
        print(format_summary(summary))
    return 0