"""Single-source shortest paths on an undirected weighted graph."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Sequence
from dataclasses import dataclass

UNREACHABLE = 2**31 - 1
"""Distance reported for vertices that cannot be reached from the source."""

_DEMO_VERTICES = 9
_DEMO_EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


@dataclass(frozen=True)
class ShortestPathTree:
    """Distances and parent links produced by a shortest-path search."""

    source: int
    distances: tuple[int, ...]
    parents: tuple[int | None, ...]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self.distances):
            raise ValueError(f"vertex {vertex} is out of range")

    def _chain(self, end: int) -> list[int]:
        chain = []
        vertex: int | None = end
        while vertex is not None:
            chain.append(vertex)
            vertex = self.parents[vertex]
        chain.reverse()
        return chain

    def path(self, end: int) -> list[int] | None:
        """Return the vertices from the source to ``end``, or None if unreachable."""
        self._check(end)
        if end != self.source and self.parents[end] is None:
            return None
        return self._chain(end)

    def format_table(self) -> str:
        """Render every destination with its distance and path as a text table."""
        lines = [f"{'Destination':<15}{'Distance':<15}Path", "-" * 57]
        for vertex, distance in enumerate(self.distances):
            route = " -> ".join(str(v) for v in self._chain(vertex))
            lines.append(f"{vertex:<15}{distance:<15} {route}")
        return "\n".join(lines)


class Graph:
    """An undirected graph with non-negative integer edge weights."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with the given weight."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def shortest_paths(self, source: int) -> ShortestPathTree:
        """Run Dijkstra's algorithm from ``source``."""
        self._check(source)
        distances = [UNREACHABLE] * len(self._adjacency)
        parents: list[int | None] = [None] * len(self._adjacency)
        distances[source] = 0
        heap = [(0, source)]
        while heap:
            _, u = heapq.heappop(heap)
            for v, weight in self._adjacency[u]:
                candidate = distances[u] + weight
                if distances[v] > candidate:
                    distances[v] = candidate
                    parents[v] = u
                    heapq.heappush(heap, (candidate, v))
        return ShortestPathTree(source, tuple(distances), tuple(parents))


def build_demo_graph() -> Graph:
    graph = Graph(_DEMO_VERTICES)
    for u, v, weight in _DEMO_EDGES:
        graph.add_edge(u, v, weight)
    return graph


def _interactive(tree: ShortestPathTree) -> None:
    while True:
        try:
            start = int(input("Enter starting node (or -1 to exit): "))
        except (EOFError, ValueError):
            break
        if start == -1:
            break
        try:
            end = int(input("Enter ending node: "))
        except (EOFError, ValueError):
            break
        try:
            route = tree.path(end)
        except ValueError as exc:
            print(exc)
            continue
        if route is None or end == tree.source:
            print(f"No path exists from {start} to {end}.")
        else:
            print(f"Path from {start} to {end}: " + " -> ".join(map(str, route)))


def main(argv: Sequence[str] | None = None) -> int:
    """Compute shortest paths on the demonstration graph and report them."""
    parser = argparse.ArgumentParser(description="Dijkstra shortest paths demo")
    parser.add_argument("--source", type=int, default=0)
    parser.add_argument(
        "--interactive", action="store_true",
        help="prompt for start and end nodes instead of printing the table",
    )
    args = parser.parse_args(argv)

    graph = build_demo_graph()
    try:
        tree = graph.shortest_paths(args.source)
    except ValueError as exc:
        parser.error(str(exc))
    if args.interactive:
        _interactive(tree)
    else:
        print(tree.format_table())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())