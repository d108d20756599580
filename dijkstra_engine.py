"""
Heap-based Dijkstra engine for campus_nav.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface. Edge weights must be
non-negative.
"""

from dataclasses import dataclass
from typing import Dict, List, Set
import heapq
import logging
import math

from algorithms import ShortestPathEngine
from graph import Graph, Vertex
from routing import Predecessor, PredecessorEntry, ShortestPaths

logger = logging.getLogger(__name__)


def prioritize(a: "FrontierEntry", b: "FrontierEntry") -> bool:
    """
    Frontier ordering: True if a must be extracted before b.

    Lower tentative distance wins; equal distances fall back to the lower
    vertex label so extraction order is reproducible.
    """
    if a.distance != b.distance:
        return a.distance < b.distance
    return a.vertex < b.vertex


@dataclass(frozen=True)
class FrontierEntry:
    vertex: Vertex
    distance: float

    def __lt__(self, other: "FrontierEntry") -> bool:
        return prioritize(self, other)


class Frontier:
    """
    Min-priority frontier of (vertex, tentative distance) entries.

    Entries are never updated or removed in place; a vertex may appear many
    times and callers discard stale copies when they are popped.
    """

    def __init__(self) -> None:
        self._heap: List[FrontierEntry] = []
        self.pushes = 0
        self.pops = 0

    def push(self, vertex: Vertex, distance: float) -> None:
        heapq.heappush(self._heap, FrontierEntry(vertex, distance))
        self.pushes += 1

    def pop(self) -> FrontierEntry:
        self.pops += 1
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O((V + E) log V); the frontier is seeded with every vertex, and each
        successful relaxation pushes one more entry.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def solve(self, graph: Graph, start: Vertex) -> ShortestPaths:
        """
        Dijkstra that records predecessors for path reconstruction.

        Every vertex of graph appears in both returned maps. The start maps to
        Predecessor.ROOT, unreached vertices to Predecessor.NONE with an
        infinite distance. Raises KeyError if start is not a vertex of graph.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0

        vertices = graph.vertices()
        dist: Dict[Vertex, float] = {}
        prev: Dict[Vertex, PredecessorEntry] = {}
        frontier = Frontier()

        for v in vertices:
            dist[v] = math.inf
            prev[v] = Predecessor.NONE
            frontier.push(v, math.inf)

        if start not in dist:
            raise KeyError(start)

        dist[start] = 0.0
        prev[start] = Predecessor.ROOT
        frontier.push(start, 0.0)

        visited: Set[Vertex] = set()

        while frontier:
            u = frontier.pop().vertex

            # Only unreachable vertices are left once an infinite one surfaces.
            if dist[u] == math.inf:
                break
            if u in visited:
                continue
            visited.add(u)

            d_u = dist[u]
            for v in graph.neighbors(u):
                self.last_edges_examined += 1
                alt = d_u + graph.get_weight(u, v)
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    frontier.push(v, alt)
                    self.last_relaxed += 1

        self.last_heap_pops = frontier.pops
        self.last_heap_pushes = frontier.pushes
        logger.debug(
            "dijkstra from %r: finalized=%d/%d pops=%d pushes=%d relaxed=%d",
            start,
            len(visited),
            len(vertices),
            self.last_heap_pops,
            self.last_heap_pushes,
            self.last_relaxed,
        )
        return ShortestPaths(start=start, distances=dist, predecessors=prev)
