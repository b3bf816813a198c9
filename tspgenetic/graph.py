"""Minimum spanning tree of a complete weighted graph."""

from __future__ import annotations

import math
from collections.abc import Sequence


def min_key(key: Sequence[float], in_mst: Sequence[bool]) -> int | None:
    """Index of the smallest finite key not yet in the tree, or ``None``."""
    best: int | None = None
    smallest = math.inf
    for index, (value, taken) in enumerate(zip(key, in_mst)):
        if not taken and value < smallest:
            smallest = value
            best = index
    return best


class MST:
    """Prim's minimum spanning tree over a square weight matrix."""

    def __init__(self, weights: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(weights)
        if any(len(row) != n for row in weights):
            raise ValueError("weight matrix must be square")
        if not 0 <= root < n:
            raise ValueError(f"root {root} out of range for {n} vertices")

        key: list[float] = [math.inf] * n
        parent: list[int | None] = [None] * n
        in_mst = [False] * n
        key[root] = 0

        for _ in range(n - 1):
            u = min_key(key, in_mst)
            if u is None:
                raise ValueError("graph is disconnected")
            in_mst[u] = True
            for v, weight in enumerate(weights[u]):
                if v != u and not in_mst[v] and weight < key[v]:
                    parent[v] = u
                    key[v] = weight

        self.size = n
        self.weight = 0
        self.adjacency: list[list[int]] = [[] for _ in range(n)]
        for v, u in enumerate(parent):
            if v == root:
                continue
            if u is None:
                raise ValueError("graph is disconnected")
            self.add_edge(u, v)
            self.weight += weights[v][u]

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` with an undirected edge."""
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def dfs(self, start: int) -> list[int]:
        """Vertices in depth-first preorder from ``start``."""
        if not 0 <= start < self.size:
            raise ValueError(f"start vertex {start} out of range")
        visited = [False] * self.size
        visited[start] = True
        order = [start]
        stack = [iter(self.adjacency[start])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append(iter(self.adjacency[v]))
                    break
            else:
                stack.pop()
        return order

    def clear(self) -> None:
        """Drop the tree's edges and vertices."""
        self.adjacency = []
        self.size = 0