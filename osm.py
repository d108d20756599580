"""
OpenStreetMap XML reader for campus_nav.

Extracts the three things the navigator needs from an .osm export:
  - nodes: every <node> with its lat/lon,
  - footways: walking paths, as ordered node ID sequences,
  - university buildings: named ways tagged building=university.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union
import logging
import xml.etree.ElementTree as ET

from geodesy import Coordinates

logger = logging.getLogger(__name__)


class MapLoadError(Exception):
    """The map file is missing, unreadable or not OSM XML."""


@dataclass(frozen=True)
class FootwayInfo:
    id: int
    nodes: Tuple[int, ...]


@dataclass(frozen=True)
class BuildingInfo:
    """
    University building with its centroid position.

    abbrev is the parenthesised suffix of the OSM name, e.g. "SEO" for
    "Science & Engineering Offices (SEO)"; empty if there is none.
    """

    fullname: str
    abbrev: str
    coords: Coordinates


@dataclass
class OpenStreetMap:
    nodes: Dict[int, Coordinates] = field(default_factory=dict)
    footways: List[FootwayInfo] = field(default_factory=list)
    buildings: List[BuildingInfo] = field(default_factory=list)


def load_map(path: Union[str, Path]) -> OpenStreetMap:
    """
    Parse an OSM XML file into nodes, footways and buildings.

    Raises MapLoadError if the file cannot be read or parsed.
    """
    try:
        root = ET.parse(str(path)).getroot()
    except (OSError, ET.ParseError) as exc:
        raise MapLoadError(f"unable to load open street map {path}: {exc}") from exc

    if root.tag != "osm":
        raise MapLoadError(f"{path} is not an OSM document (root element <{root.tag}>)")

    return parse_map(root)


def parse_map(root: ET.Element) -> OpenStreetMap:
    osm_map = OpenStreetMap()
    osm_map.nodes = read_map_nodes(root)
    osm_map.footways = read_footways(root, osm_map.nodes)
    osm_map.buildings = read_university_buildings(root, osm_map.nodes)
    logger.info(
        "loaded map: %d nodes, %d footways, %d buildings",
        len(osm_map.nodes),
        len(osm_map.footways),
        len(osm_map.buildings),
    )
    return osm_map


def read_map_nodes(root: ET.Element) -> Dict[int, Coordinates]:
    nodes: Dict[int, Coordinates] = {}
    for elem in root.iter("node"):
        try:
            node_id = int(elem.attrib["id"])
            lat = float(elem.attrib["lat"])
            lon = float(elem.attrib["lon"])
        except (KeyError, ValueError):
            logger.warning("skipping malformed node %r", elem.attrib)
            continue
        nodes[node_id] = Coordinates(node_id, lat, lon)
    return nodes


def read_footways(root: ET.Element, nodes: Dict[int, Coordinates]) -> List[FootwayInfo]:
    """
    Collect ways tagged highway=footway or area:highway=footway.

    Marks every node on a footway with on_footway=True in nodes.
    """
    footways: List[FootwayInfo] = []
    for way in root.iter("way"):
        tags = _tags(way)
        if tags.get("highway") != "footway" and tags.get("area:highway") != "footway":
            continue

        way_id = _way_id(way)
        if way_id is None:
            continue

        refs = _known_refs(way, nodes)
        for ref in refs:
            nodes[ref] = Coordinates(ref, nodes[ref].lat, nodes[ref].lon, on_footway=True)
        footways.append(FootwayInfo(way_id, tuple(refs)))
    return footways


def read_university_buildings(
    root: ET.Element, nodes: Dict[int, Coordinates]
) -> List[BuildingInfo]:
    buildings: List[BuildingInfo] = []
    for way in root.iter("way"):
        tags = _tags(way)
        if tags.get("building") != "university":
            continue

        name = tags.get("name", "").strip()
        way_id = _way_id(way)
        refs = _known_refs(way, nodes)
        if not name or way_id is None or not refs:
            logger.warning("skipping university building way %s without name or nodes", way.get("id"))
            continue

        lat, lon = _centroid(nodes[ref] for ref in refs)
        buildings.append(
            BuildingInfo(
                fullname=name,
                abbrev=_abbreviation(name),
                coords=Coordinates(way_id, lat, lon),
            )
        )
    return buildings


def _tags(elem: ET.Element) -> Dict[str, str]:
    return {tag.get("k", ""): tag.get("v", "") for tag in elem.iter("tag")}


def _way_id(way: ET.Element) -> Optional[int]:
    try:
        return int(way.attrib["id"])
    except (KeyError, ValueError):
        logger.warning("skipping way without a numeric id %r", way.attrib)
        return None


def _known_refs(way: ET.Element, nodes: Dict[int, Coordinates]) -> List[int]:
    refs: List[int] = []
    for nd in way.iter("nd"):
        try:
            ref = int(nd.attrib["ref"])
        except (KeyError, ValueError):
            continue
        if ref in nodes:
            refs.append(ref)
    return refs


def _centroid(points: Iterable[Coordinates]) -> Tuple[float, float]:
    lat_sum = lon_sum = 0.0
    count = 0
    for p in points:
        lat_sum += p.lat
        lon_sum += p.lon
        count += 1
    return lat_sum / count, lon_sum / count


def _abbreviation(name: str) -> str:
    if name.endswith(")") and "(" in name:
        return name[name.rindex("(") + 1 : -1].strip()
    return ""
