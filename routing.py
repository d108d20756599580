"""
Shortest-path results and route reconstruction for campus_nav.

Defines the predecessor sentinels, the per-solve ShortestPaths result and
the stateless helper that turns a predecessor map into a concrete route.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Union
import math

from graph import Vertex


class Predecessor(Enum):
    """
    Predecessor sentinels that can never collide with a vertex label.

    ROOT marks the start vertex of a solve; NONE marks a vertex the solve
    never reached.
    """

    ROOT = "root"
    NONE = "none"


PredecessorEntry = Union[Vertex, Predecessor]


class UnreachableDestinationError(LookupError):
    """Raised when no path exists from start to destination."""

    def __init__(self, start: Vertex, destination: Vertex) -> None:
        super().__init__(f"destination {destination!r} is unreachable from {start!r}")
        self.start = start
        self.destination = destination


@dataclass(frozen=True)
class Route:
    """
    Concrete shortest route from start to destination.
    """
    vertices: List[Vertex]
    distance: float

    @property
    def start(self) -> Vertex:
        return self.vertices[0]

    @property
    def destination(self) -> Vertex:
        return self.vertices[-1]

    def __str__(self) -> str:
        return "->".join(str(v) for v in self.vertices)


def reconstruct_path(
    predecessors: Mapping[Vertex, PredecessorEntry],
    start: Vertex,
    destination: Vertex,
) -> List[Vertex]:
    """
    Walk predecessor links back from destination and return start -> destination.

    The walk stops when the start vertex itself is reached, regardless of the
    sentinel stored for it. Raises UnreachableDestinationError if the chain
    breaks before reaching start.
    """
    path: List[Vertex] = []
    current: PredecessorEntry = destination

    while current != start:
        parent = predecessors.get(current, Predecessor.NONE)
        if isinstance(parent, Predecessor):
            raise UnreachableDestinationError(start, destination)
        path.append(current)
        current = parent

    path.append(start)
    path.reverse()
    return path


@dataclass(frozen=True)
class ShortestPaths:
    """
    Result of one single-source solve.

    distances covers every vertex of the solved graph (math.inf if
    unreached); predecessors covers the same vertices. Unpacks as
    (distances, predecessors).
    """
    start: Vertex
    distances: Dict[Vertex, float]
    predecessors: Dict[Vertex, PredecessorEntry]

    def __iter__(self) -> Iterator[Dict]:
        yield self.distances
        yield self.predecessors

    def is_reachable(self, destination: Vertex) -> bool:
        return self.distances.get(destination, math.inf) != math.inf

    def distance_to(self, destination: Vertex) -> float:
        return self.distances.get(destination, math.inf)

    def path_to(self, destination: Vertex) -> List[Vertex]:
        """Vertices from start to destination; raises if unreachable."""
        return reconstruct_path(self.predecessors, self.start, destination)

    def route_to(self, destination: Vertex) -> Optional[Route]:
        """
        Route from start to destination, or None if destination is unreachable.
        """
        try:
            vertices = self.path_to(destination)
        except UnreachableDestinationError:
            return None
        return Route(vertices=vertices, distance=self.distances[destination])
