"""Greedy best-first search over a graph with heuristic values."""

import heapq
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from itertools import count


@dataclass
class Graph:
    """Vertices with their heuristic values and neighbour lists.

    Each neighbour entry carries the heuristic value that the search uses
    when the neighbour joins the frontier.
    """

    heuristics: dict = field(default_factory=dict)
    edges: dict = field(default_factory=dict)

    def add_vertex(
        self,
        vertex: Hashable,
        heuristic: int,
        neighbours: Iterable[tuple[Hashable, int]] | Mapping = (),
    ) -> None:
        """Add ``vertex`` with its heuristic and ``(neighbour, heuristic)`` pairs."""
        pairs = neighbours.items() if isinstance(neighbours, Mapping) else neighbours
        self.heuristics[vertex] = heuristic
        self.edges[vertex] = [(other, value) for other, value in pairs]


def best_first_search(graph: Graph, start: Hashable) -> list[tuple[Hashable, int]]:
    """Return the ``(vertex, heuristic)`` pairs in the order they are expanded.

    The vertex with the lowest heuristic on the frontier is always expanded
    next, ties going to the one discovered first. The search stops on
    reaching a heuristic of 0 or when the frontier runs dry.
    """
    if start not in graph.heuristics:
        raise KeyError(start)
    order = [(start, graph.heuristics[start])]
    if order[0][1] == 0:
        return order

    marked = {start}
    frontier: list[tuple[int, int, Hashable]] = []
    tiebreak = count()
    current = start
    while True:
        for vertex, heuristic in graph.edges.get(current, ()):
            if vertex not in marked:
                marked.add(vertex)
                heapq.heappush(frontier, (heuristic, next(tiebreak), vertex))
        if not frontier:
            break
        heuristic, _, current = heapq.heappop(frontier)
        order.append((current, heuristic))
        if heuristic == 0:
            break
    return order