"""Undirected graph with connected components by depth-first search."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from structkit.stack import _run_graph, _spaced


class _AdjacencyGraph:
    """Adjacency lists on nodes ``0 .. size-1`` with the walks the graphs share."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._adjacency: list[list[Any]] = [[] for _ in range(size)]

    def _node_count(self) -> int:
        return len(self._adjacency)

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if not 0 <= node < len(self._adjacency):
                raise IndexError(f"node {node} out of range")

    def _link(self, source: int, entry: Any) -> bool:
        if entry in self._adjacency[source]:
            return False
        self._adjacency[source].append(entry)
        return True

    def _neighbors(self, node: int) -> list[Any]:
        self._check(node)
        return self._adjacency[node][::-1]

    def _render(self) -> str:
        return "\n".join(
            f"{node}: " + _spaced(self._neighbors(node)) for node in range(self._node_count())
        )

    def _walk(self, root: int, visited: list[bool]) -> Iterator[tuple[str, int]]:
        """Depth-first walk yielding ('enter', node) and ('leave', node) events."""
        visited[root] = True
        yield "enter", root
        stack = [(root, iter(self._neighbors(root)))]
        while stack:
            node, pending = stack[-1]
            for target in pending:
                if not visited[target]:
                    visited[target] = True
                    yield "enter", target
                    stack.append((target, iter(self._neighbors(target))))
                    break
            else:
                stack.pop()
                yield "leave", node

    def _discover(self, root: int, visited: list[bool]) -> list[int]:
        """Nodes reached from ``root`` in depth-first discovery order."""
        return [node for event, node in self._walk(root, visited) if event == "enter"]


class UndirectedGraph(_AdjacencyGraph):
    """An undirected graph on nodes ``0 .. size-1`` stored as adjacency lists."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def add_edge(self, first: int, second: int) -> bool:
        """Connect two nodes; return False if they were already connected."""
        self._check(first, second)
        added = self._link(first, second)
        self._link(second, first)
        return added

    def neighbors(self, node: int) -> list[int]:
        """Nodes adjacent to ``node``, most recently added first."""
        return self._neighbors(node)

    def format(self) -> str:
        """Render one ``node: neighbours`` line per node."""
        return self._render()

    def connected_components(self) -> list[list[int]]:
        """Connected components, each listed in depth-first discovery order."""
        visited = [False] * len(self)
        return [self._discover(root, visited) for root in range(len(self)) if not visited[root]]

    def __len__(self) -> int:
        return self._node_count()


def _render_components(graph: UndirectedGraph) -> str:
    return "".join(
        f"Component number {number}: {_spaced(component)}\n"
        for number, component in enumerate(graph.connected_components(), start=1)
    )


def main(argv: list[str] | None = None) -> int:
    return _run_graph(
        argv,
        "undirected-graph",
        "Read an undirected graph from standard input and print its connected components.",
        UndirectedGraph,
        "Edge number {}: ",
        2,
        _render_components,
    )