"""Backtracking route search through an undirected maze graph."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Sequence


class MazeGraph:
    """An undirected graph whose routes are found by depth-first backtracking."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[int, list[int]] = defaultdict(list)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, node: int) -> list[int]:
        return list(self._adjacency.get(node, ()))

    def find_route(self, start: int, end: int) -> list[int] | None:
        """Return the first route found from ``start`` to ``end``, or None if there is none."""
        path = [start]
        if start == end:
            return path
        visited = {start}
        pending = [iter(self._adjacency.get(start, ()))]
        while pending:
            step = next((n for n in pending[-1] if n not in visited), None)
            if step is None:
                pending.pop()
                visited.discard(path.pop())
                continue
            visited.add(step)
            path.append(step)
            if step == end:
                return path
            pending.append(iter(self._adjacency.get(step, ())))
        return None


_DEMO_EDGES = [
    (0, 1), (1, 2), (2, 3), (2, 7), (3, 4), (3, 5), (3, 6), (5, 6), (7, 8),
    (7, 9), (9, 10), (9, 11), (11, 12), (11, 13), (11, 14), (14, 15), (15, 16),
    (15, 17), (15, 26), (18, 19), (19, 20), (26, 24), (26, 25), (24, 23),
    (23, 22), (22, 20), (20, 21), (21, 27),
]


def build_demo_maze() -> MazeGraph:
    maze = MazeGraph()
    for u, v in _DEMO_EDGES:
        maze.add_edge(u, v)
    return maze


def main(argv: Sequence[str] | None = None) -> int:
    """Find and print a route through the demonstration maze."""
    parser = argparse.ArgumentParser(description="Maze route search")
    parser.add_argument("start", nargs="?", type=int, default=0)
    parser.add_argument("end", nargs="?", type=int, default=27)
    args = parser.parse_args(argv)

    route = build_demo_maze().find_route(args.start, args.end)
    if route is None:
        print(f"Failure! No path exists from node {args.start} to node {args.end}.")
    else:
        nodes = "".join(f"{node} " for node in route)
        print(f"Path from {args.start} to {args.end}: {nodes}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())