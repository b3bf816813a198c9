# tspgenetic

Heuristic solver for the symmetric Euclidean travelling salesman problem.
It reads TSPLIB instances that have a `NODE_COORD_SECTION` and searches for a
short closed tour. The search uses:

- an initial population that mixes random tours with depth-first walks of a
  minimum spanning tree (Prim's algorithm),
- roulette-wheel parent selection and one-point order crossover,
- mutation that either reverses a random section of the tour or swaps its
  two end cities,
- a randomised 2-opt style local search applied to every survivor,
- an island model: five sub-populations evolve on their own for 100
  generations per round and then swap individuals. The search stops once a
  set number of rounds in a row brings no shorter tour.

Distances are Euclidean, rounded to the nearest integer.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
tspgenetic --help
```

lists the options. The one positional argument picks a fixed set of
instances, looked up by file name in the directory given by `--dir`
(default `testy`):

| option | instances |
|--------|-----------|
| 0 | `xqf131.tsp`, `xqg237.tsp`, `pma343.tsp`, `pka379.tsp`, `bcl380.tsp`, `pbl395.tsp`, `pbk411.tsp`, `pbn423.tsp`, `pbm436.tsp`, `xql662.tsp` |
| 1 | `xit1083.tsp` |
| 2 | `dcb2086.tsp` |
| 3 | `pds2566.tsp` |
| 4 | `icw1483.tsp` |
| 5 | `djc1785.tsp` |

Any other number runs nothing. For example:

```
tspgenetic 0 --dir instances --runs 3 --iterations 20 --seed 1
```

Further options: `--runs`, `--iterations` (rounds without improvement before
the search stops, default 100), `--generation-size` (400),
`--parents-size` (200), `--mutation-rate` (0.1), `--crossover-rate` (0.8)
and `--seed`. Without `--runs`, instances above 1000 cities get 2 runs and
smaller ones 5.

For each instance the command prints one line per run (run index and tour
length) and then one LaTeX table row holding the instance name, the best
length and the average length over the runs. If a file cannot be read or
is not a usable instance, it reports this on standard error and exits with
status 1.

The command cannot be pointed at arbitrary file names; to solve another
instance, use `process_file` from Python.

## Library use

```python
from tspgenetic.tsplib import read_coordinates, distance_matrix
from tspgenetic.permutation import tour_weight
from tspgenetic.cli import process_file, format_summary

points = read_coordinates("instances/xqf131.tsp")
distance = distance_matrix(points)

summary = process_file(
    "instances/xqf131.tsp",
    runs=3,
    iterations=20,
    generation_size=400,
    parents_size=200,
    mutation_rate=0.1,
    crossover_rate=0.8,
    seed=1,
)
print(summary.weights, summary.best, summary.average)
print(format_summary(summary))
```

The parts can also be used one at a time:

- `tspgenetic.tsplib` reads coordinates (`read_coordinates`,
  `parse_coordinates`) into `Point` values and builds the distance matrix
  (`distance_matrix`).
- `tspgenetic.permutation` computes tour lengths and the change in length
  when a section is reversed (`tour_weight`, `inversion_weight`,
  `reverse_section`, `inversion_pairs`, `random_permutation`).
- `tspgenetic.graph.MST` builds a minimum spanning tree and walks it with
  `dfs`.
- `tspgenetic.local_search.random_local_search` improves a tour in place
  and returns its new length.
- `tspgenetic.genetic` holds `Person`, the selection methods (`roulette`,
  `tournament`, `select_parents` with `SelectOption`), `mutate`,
  `point_crossover`, `two_point_crossover`, `generate_first_generation` and
  `genetic_algorithm`, which evolves one population and returns a
  `BestTour`.
- `tspgenetic.islands.run_islands` runs the island model; `exchange` swaps
  members between islands (drawn from the first four islands only).

All randomness goes through `tspgenetic.rng.RandomGenerator`. A fixed
`seed` gives runs that can be repeated exactly.

`tspgenetic.tsplib.TspFormatError` (a `ValueError`) is raised for a file
with no `NODE_COORD_SECTION`, a malformed coordinate line or more than 3000
cities, and by `process_file` for an instance with fewer than 4 cities.