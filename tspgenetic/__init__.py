"""Island-model genetic algorithm with local search for the Euclidean travelling salesman problem."""

__version__ = "0.1.0"