"""Weighted undirected graph with Dijkstra shortest distances."""

from __future__ import annotations

import heapq

from structkit.stack import _run_graph, _spaced
from structkit.undirected_graph import _AdjacencyGraph

INF = 1_000_000_000
_START = 3


class WeightedGraph(_AdjacencyGraph):
    """An undirected graph with non-negative integer edge weights; neighbours are ``(node, weight)`` pairs."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def add_edge(self, first: int, second: int, weight: int) -> bool:
        """Connect two nodes; return False if that exact edge already existed."""
        self._check(first, second)
        if weight < 0:
            raise ValueError("edge weight must not be negative")
        added = self._link(first, (second, weight))
        self._link(second, (first, weight))
        return added

    def neighbors(self, node: int) -> list[tuple[int, int]]:
        """``(node, weight)`` pairs adjacent to ``node``, most recently added first."""
        return self._neighbors(node)

    def dijkstra(self, start: int) -> list[int]:
        """Shortest distances from ``start``; unreachable nodes get ``INF``."""
        self._check(start)
        distance = [INF] * len(self)
        distance[start] = 0
        pending = [(0, start)]
        while pending:
            weight, node = heapq.heappop(pending)
            if weight > distance[node]:
                continue
            for target, step in self.neighbors(node):
                candidate = weight + step
                if distance[target] > candidate:
                    distance[target] = candidate
                    heapq.heappush(pending, (candidate, target))
        return distance

    def __len__(self) -> int:
        return self._node_count()


def main(argv: list[str] | None = None) -> int:
    return _run_graph(
        argv,
        "weighted-graph",
        "Read a weighted graph from standard input and print distances from node 3.",
        WeightedGraph,
        "Edge number {}: ",
        3,
        lambda graph: _spaced(graph.dijkstra(_START)) + "\n",
    )