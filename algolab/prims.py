"""Minimum spanning tree of a city network by Prim's algorithm."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

INF = 999
MAX_CITIES = 10

Edge = tuple[str, str, int]


@dataclass(frozen=True)
class PrimStep:
    """State after one iteration: nearest tree vertex per city and edges so far.

    A city already in the tree has None as its nearest vertex.
    """

    iteration: int
    nearest: tuple[Optional[int], ...]
    edges: tuple[Edge, ...]


@dataclass(frozen=True)
class SpanningTree:
    edges: tuple[Edge, ...]
    total_cost: int
    steps: tuple[PrimStep, ...]


class CityGraph:
    """Undirected weighted graph of named cities held as a cost matrix."""

    def __init__(self, cities: Iterable[str]) -> None:
        self.cities = tuple(cities)
        if len(self.cities) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        size = len(self.cities)
        self._cost = [[0 if i == j else INF for j in range(size)] for i in range(size)]

    def _index(self, city: str) -> int:
        try:
            return self.cities.index(city)
        except ValueError:
            raise KeyError(city) from None

    def connect(self, a: str, b: str, cost: int) -> None:
        """Join two distinct cities with a road of the given cost."""
        i, j = self._index(a), self._index(b)
        if i == j:
            raise ValueError("a city cannot be connected to itself")
        if cost >= INF:
            raise ValueError(f"cost must be below {INF}")
        self._cost[i][j] = self._cost[j][i] = cost

    def cost(self, a: str, b: str) -> Optional[int]:
        """Cost between two cities, or None if they are not connected."""
        value = self._cost[self._index(a)][self._index(b)]
        return None if value == INF else value

    def format_matrix(self) -> str:
        header = " " * 12 + "".join(f"{city:>12}" for city in self.cities)
        rows = [
            f"{city:>12}" + "".join(f"{'INF' if v == INF else v:>12}" for v in costs)
            for city, costs in zip(self.cities, self._cost)
        ]
        return "\n".join([header, *rows])

    def prims(self, start: str) -> SpanningTree:
        """Grow a minimum spanning tree from start, recording each iteration."""
        origin = self._index(start)
        size = len(self.cities)
        nearest: list[Optional[int]] = [None if k == origin else origin for k in range(size)]
        edges: list[Edge] = []
        steps: list[PrimStep] = []
        for iteration in range(1, size):
            candidates = [
                (self._cost[k][near], k)
                for k, near in enumerate(nearest)
                if near is not None and self._cost[k][near] < INF
            ]
            if not candidates:
                break
            cost, chosen = min(candidates)
            edges.append((self.cities[nearest[chosen]], self.cities[chosen], cost))
            nearest[chosen] = None
            for k, near in enumerate(nearest):
                if near is not None and self._cost[k][chosen] < self._cost[k][near]:
                    nearest[k] = chosen
            steps.append(PrimStep(iteration, tuple(nearest), tuple(edges)))
        return SpanningTree(tuple(edges), sum(edge[2] for edge in edges), tuple(steps))


def _edge_text(edge: Edge) -> str:
    return f"({edge[0]} - {edge[1]} : {edge[2]})"


def main(argv: Sequence[str] | None = None) -> int:
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        print("Enter the number of cities: ", end="")
        count = int(next(tokens))
        print("Enter the names of the cities:")
        names = []
        for index in range(count):
            print(f"City {index}: ", end="")
            names.append(next(tokens))
        graph = CityGraph(names)
        print("Enter connections and their cost:")
        for i, a in enumerate(names):
            for b in names[i + 1:]:
                print(f"Is {a} connected to {b}? (Y/N): ", end="")
                if next(tokens).lower() == "y":
                    print("Enter cost: ", end="")
                    graph.connect(a, b, int(next(tokens)))
        print("Adjacency matrix created.")
        print("\nAdjacency Matrix:")
        print(graph.format_matrix())
        print("Enter the starting city: ", end="")
        start = next(tokens)
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    if start not in graph.cities:
        print("Invalid city name.")
        return 1
    tree = graph.prims(start)
    for step in tree.steps:
        nearest = "".join(f"{-1 if k is None else k} " for k in step.nearest)
        so_far = "".join(f"{_edge_text(edge)} " for edge in step.edges)
        print(f"\nIteration {step.iteration}:")
        print(f"Nearest: {nearest}")
        print(f"Edges in MST so far: {so_far}")
        print(f"Current MST Edge Count: {len(step.edges)}")
    print("\nMinimum Spanning Tree Edges:")
    for a, b, cost in tree.edges:
        print(f"Edge: ({a} - {b}) Cost: {cost}")
    print(f"Total Minimum Cost: {tree.total_cost}")
    return 0


if __name__ == "__main__":
    sys.exit(main())