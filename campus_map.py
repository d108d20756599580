"""
Utilities to turn a loaded OSM map into a walkable graph and to resolve
buildings to graph vertices.
"""

from typing import Iterable, Optional, Sequence
import logging

from geodesy import Coordinates, distance_between, distance_miles
from osm import BuildingInfo, FootwayInfo, OpenStreetMap
from weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


def build_footway_graph(osm_map: OpenStreetMap) -> WeightedGraph:
    """
    One vertex per map node; two directed edges per consecutive footway pair.

    Both directions carry the great-circle distance in miles, so footways are
    walkable either way.
    """
    graph = WeightedGraph()
    for node_id in osm_map.nodes:
        graph.add_vertex(node_id)

    for footway in osm_map.footways:
        _connect_footway(graph, osm_map, footway)

    logger.info("built footway graph: %d vertices, %d edges", graph.vertex_count(), graph.edge_count())
    return graph


def _connect_footway(graph: WeightedGraph, osm_map: OpenStreetMap, footway: FootwayInfo) -> None:
    for a, b in zip(footway.nodes, footway.nodes[1:]):
        weight = distance_between(osm_map.nodes[a], osm_map.nodes[b])
        graph.add_edge(a, b, weight)
        graph.add_edge(b, a, weight)


def find_building(query: str, buildings: Sequence[BuildingInfo]) -> Optional[BuildingInfo]:
    """
    Look a building up by exact abbreviation, then by substring of its name.

    Returns the first match in map order, or None.
    """
    for building in buildings:
        if building.abbrev == query:
            return building

    for building in buildings:
        if query in building.fullname:
            return building

    return None


def footway_nodes(osm_map: OpenStreetMap) -> Iterable[Coordinates]:
    for footway in osm_map.footways:
        for node_id in footway.nodes:
            yield osm_map.nodes[node_id]


def nearest_node(lat: float, lon: float, osm_map: OpenStreetMap) -> Optional[Coordinates]:
    """
    Closest footway node to (lat, lon); the first one found wins ties.

    Returns None if the map has no footway nodes.
    """
    best: Optional[Coordinates] = None
    best_dist = 0.0
    for node in footway_nodes(osm_map):
        d = distance_miles(lat, lon, node.lat, node.lon)
        if best is None or d < best_dist:
            best = node
            best_dist = d
    return best
