"""
Algorithm interfaces for routing.

Keeps graph algorithms separate from map loading and the navigator CLI.
"""

from abc import ABC, abstractmethod

from graph import Graph, Vertex
from routing import ShortestPaths


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def solve(self, graph: Graph, start: Vertex) -> ShortestPaths:
        """
        Compute shortest-path costs plus the predecessor chain for every vertex.

        Returns:
            ShortestPaths covering every vertex of graph. Unreached vertices
            keep an infinite distance and the Predecessor.NONE sentinel.
        """
        raise NotImplementedError
