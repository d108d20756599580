"""
Concrete directed, weighted graph implementation for campus_nav.

Implements the Graph interface with a sparse vertex -> (neighbor -> weight)
mapping. There is no upper bound on the number of vertices.
"""

from typing import Dict, List, Optional, TextIO
import sys

from graph import Graph, Vertex


class WeightedGraph(Graph):
    """
    Directed, weighted graph backed by nested dictionaries.

    Vertices and edges are added incrementally while a map is loaded; after
    that the graph is treated as read-only. Mutating the graph while a
    shortest-path solve is running over it is undefined behaviour.

    Lookups never raise on a missing vertex or edge: failures are reported
    through False or None return values.
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, float]] = {}
        self._vertices: List[Vertex] = []

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> bool:
        """
        Add vertex with no outgoing edges.

        Returns False, leaving the graph untouched, if it already exists.
        """
        if vertex in self._adj:
            return False

        self._adj[vertex] = {}
        self._vertices.append(vertex)
        return True

    def add_edge(self, src: Vertex, dst: Vertex, weight: float) -> bool:
        """
        Add or update the directed edge src -> dst with weight.

        Both endpoints must already be vertices; otherwise nothing changes and
        False is returned. An existing edge has its weight overwritten.
        """
        if src not in self._adj or dst not in self._adj:
            return False

        self._adj[src][dst] = weight
        return True

    # --- Queries -------------------------------------------------------------

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    def get_weight(self, src: Vertex, dst: Vertex) -> Optional[float]:
        return self._adj.get(src, {}).get(dst)

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        return sorted(self._adj.get(vertex, {}))

    def all_vertices(self) -> List[Vertex]:
        """Snapshot of every vertex, in the order they were first added."""
        return list(self._vertices)

    def vertices(self) -> List[Vertex]:
        return self.all_vertices()

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # --- Diagnostics ---------------------------------------------------------

    def dump(self, output: TextIO = sys.stdout) -> None:
        """Write vertex/edge counts, the vertex list and all edges to output."""
        output.write("***************************************************\n")
        output.write("********************* GRAPH ***********************\n")
        output.write(f"**Num vertices: {self.vertex_count()}\n")
        output.write(f"**Num edges: {self.edge_count()}\n")

        output.write("\n**Vertices:\n")
        for i, vertex in enumerate(self._vertices):
            output.write(f" {i}. {vertex}\n")

        output.write("\n**Edges:\n")
        for src in self._vertices:
            triples = " ".join(f"({src},{dst},{w})" for dst, w in self._adj[src].items())
            output.write(f"{src}: {triples}\n")

        output.write("**************************************************\n")
