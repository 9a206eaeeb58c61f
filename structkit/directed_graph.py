"""Directed graph with strongly connected components by Kosaraju's algorithm."""

from __future__ import annotations

from structkit.stack import _run_graph, _spaced
from structkit.undirected_graph import _AdjacencyGraph


class DirectedGraph(_AdjacencyGraph):
    """A directed graph on nodes ``0 .. size-1`` stored as adjacency lists."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._edges: list[tuple[int, int]] = []

    def add_edge(self, source: int, target: int) -> bool:
        """Add an edge; return False if it already existed."""
        self._check(source, target)
        if not self._link(source, target):
            return False
        self._edges.append((source, target))
        return True

    def neighbors(self, node: int) -> list[int]:
        """Targets of edges leaving ``node``, most recently added first."""
        return self._neighbors(node)

    def reversed(self) -> DirectedGraph:
        """Return a new graph with every edge turned around."""
        inverse = DirectedGraph(len(self))
        for source, target in self._edges:
            inverse.add_edge(target, source)
        return inverse

    def format(self) -> str:
        """Render one ``node: targets`` line per node."""
        return self._render()

    def strongly_connected_components(self) -> list[list[int]]:
        """Strongly connected components, each in discovery order."""
        visited = [False] * len(self)
        finished: list[int] = []
        for root in range(len(self)):
            if not visited[root]:
                finished.extend(node for event, node in self._walk(root, visited) if event == "leave")

        inverse = self.reversed()
        visited = [False] * len(self)
        return [inverse._discover(root, visited) for root in reversed(finished) if not visited[root]]

    def __len__(self) -> int:
        return self._node_count()


def main(argv: list[str] | None = None) -> int:
    return _run_graph(
        argv,
        "directed-graph",
        "Read a directed graph from standard input and print its strongly connected components.",
        DirectedGraph,
        "Insert edge number {}: ",
        2,
        lambda graph: "".join(_spaced(component) + "\n" for component in graph.strongly_connected_components()),
    )