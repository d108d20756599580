"""
Directed, weighted graph abstraction for campus_nav.

Vertices are opaque, hashable and totally ordered labels (OSM node IDs in
practice). Edges are directed: u -> v with a non-negative float weight.
"""

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Sequence

Vertex = Hashable


class Graph(ABC):
    """Read-side view of a directed, weighted graph used by path engines."""

    @abstractmethod
    def vertices(self) -> Sequence[Vertex]:
        """Return all vertices in the graph, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """
        Destinations of the outgoing edges of vertex, in ascending order.

        Returns an empty list for unknown vertices. get_weight must return a
        weight for every vertex listed here.
        """
        raise NotImplementedError

    @abstractmethod
    def get_weight(self, src: Vertex, dst: Vertex) -> Optional[float]:
        """Weight of the edge src -> dst, or None if there is no such edge."""
        raise NotImplementedError
