"""
Interactive campus navigator.

Reads navigator.yml for defaults, loads an OSM map, builds the footway graph
and then answers building-to-building walking queries with Dijkstra until
the user enters "#".
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO
import argparse
import logging
import sys

import yaml

from algorithms import ShortestPathEngine
from campus_map import build_footway_graph, find_building, nearest_node
from dijkstra_engine import DijkstraEngine
from geodesy import Coordinates
from osm import BuildingInfo, MapLoadError, OpenStreetMap, load_map
from weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "navigator.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """navigator.yml holds a value the navigator cannot use."""


class NoFootwaysError(ValueError):
    """The map has no footway nodes to snap buildings onto."""


@dataclass(frozen=True)
class NavigatorConfig:
    map_file: str = "map.osm"
    precision: int = 8
    log_level: str = "WARNING"


def load_config(path: Path | None = None) -> NavigatorConfig:
    """
    Load navigator settings from YAML; a missing file yields the defaults.
    """
    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return NavigatorConfig()

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    defaults = NavigatorConfig()
    precision = data.get("precision", defaults.precision)
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigError(f"{path}: precision must be a non-negative integer, got {precision!r}")

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"{path}: unknown log_level {log_level!r}")

    return NavigatorConfig(
        map_file=str(data.get("map_file", defaults.map_file)),
        precision=precision,
        log_level=log_level,
    )


@dataclass(frozen=True)
class Navigation:
    """
    Outcome of one start/destination query.

    path is None when the destination node cannot be reached on foot.
    """
    start: BuildingInfo
    destination: BuildingInfo
    start_node: Coordinates
    destination_node: Coordinates
    distance: float
    path: Optional[List[int]]

    @property
    def reachable(self) -> bool:
        return self.path is not None


def navigate(
    osm_map: OpenStreetMap,
    graph: WeightedGraph,
    engine: ShortestPathEngine,
    start: BuildingInfo,
    destination: BuildingInfo,
) -> Navigation:
    """
    Snap both buildings to their nearest footway nodes and run the engine.

    Raises NoFootwaysError if the map has no footways to snap to.
    """
    start_node = nearest_node(start.coords.lat, start.coords.lon, osm_map)
    dest_node = nearest_node(destination.coords.lat, destination.coords.lon, osm_map)
    if start_node is None or dest_node is None:
        raise NoFootwaysError("map has no footway nodes to navigate between")

    result = engine.solve(graph, start_node.id)
    route = result.route_to(dest_node.id)
    return Navigation(
        start=start,
        destination=destination,
        start_node=start_node,
        destination_node=dest_node,
        distance=result.distance_to(dest_node.id),
        path=route.vertices if route is not None else None,
    )


class NavigatorSession:
    """
    Prompt/response loop over text streams, so tests can drive it.
    """

    def __init__(
        self,
        osm_map: OpenStreetMap,
        graph: WeightedGraph,
        engine: ShortestPathEngine,
        stdin: TextIO,
        stdout: TextIO,
        precision: int = 8,
    ) -> None:
        self.osm_map = osm_map
        self.graph = graph
        self.engine = engine
        self.stdin = stdin
        self.stdout = stdout
        self.precision = precision

    def run(self) -> None:
        while True:
            start_query = self._prompt("Enter start (partial name or abbreviation), or #> ")
            if start_query is None or start_query == "#":
                break
            dest_query = self._prompt("Enter destination (partial name or abbreviation)> ")
            if dest_query is None:
                break
            self.query(start_query, dest_query)

    def query(self, start_query: str, dest_query: str) -> Optional[Navigation]:
        start = find_building(start_query, self.osm_map.buildings)
        if start is None:
            self._print("Start building not found")
            return None
        destination = find_building(dest_query, self.osm_map.buildings)
        if destination is None:
            self._print("Destination building not found")
            return None

        self._print("Starting point:")
        self._print(f" {start.fullname}")
        self._print(f" {self._coords(start.coords)}")
        self._print("Destination point:")
        self._print(f" {destination.fullname}")
        self._print(f" {self._coords(destination.coords)}")
        self._print()

        try:
            nav = navigate(self.osm_map, self.graph, self.engine, start, destination)
        except NoFootwaysError as exc:
            logger.warning("%s", exc)
            self._print("Sorry, destination unreachable")
            self._print()
            return None

        self._print("Nearest start node:")
        self._print(f" {nav.start_node.id}")
        self._print(f" {self._coords(nav.start_node)}")
        self._print("Nearest destination node:")
        self._print(f" {nav.destination_node.id}")
        self._print(f" {self._coords(nav.destination_node)}")
        self._print()

        self._print("Navigating with Dijkstra...")
        if nav.path is None:
            self._print("Sorry, destination unreachable")
            self._print()
            return nav

        self._print(f"Distance to dest: {self._num(nav.distance)} miles")
        self._print("Path: " + "->".join(str(v) for v in nav.path))
        return nav

    def _prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _num(self, value: float) -> str:
        return f"{value:.{self.precision}g}"

    def _coords(self, c: Coordinates) -> str:
        return f"({self._num(c.lat)}, {self._num(c.lon)})"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walking directions between campus buildings.")
    parser.add_argument("--config", type=Path, default=None, help="path to navigator.yml")
    parser.add_argument("--map", dest="map_file", default=None, help="OSM file; skips the filename prompt")
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = _parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        print(f"**Error: {exc}", file=stdout)
        return 2
    logging.basicConfig(level=cfg.log_level)

    print("** Navigating campus open street map **", file=stdout)
    print(file=stdout)

    filename = args.map_file
    if filename is None:
        stdout.write("Enter map filename> ")
        stdout.flush()
        filename = stdin.readline().strip() or cfg.map_file

    try:
        osm_map = load_map(filename)
    except MapLoadError as exc:
        logger.error("%s", exc)
        print("**Error: unable to load open street map.", file=stdout)
        print(file=stdout)
        return 1

    print(file=stdout)
    print(f"# of nodes: {len(osm_map.nodes)}", file=stdout)
    print(f"# of footways: {len(osm_map.footways)}", file=stdout)
    print(f"# of buildings: {len(osm_map.buildings)}", file=stdout)

    graph = build_footway_graph(osm_map)
    print(f"# of vertices: {graph.vertex_count()}", file=stdout)
    print(f"# of edges: {graph.edge_count()}", file=stdout)
    print(file=stdout)

    session = NavigatorSession(osm_map, graph, DijkstraEngine(), stdin, stdout, precision=cfg.precision)
    session.run()

    print("** Done **", file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
