"""
Geographic primitives: map coordinates and great-circle distance.
"""

from dataclasses import dataclass
import math


EARTH_RADIUS_MILES = 3958.8


@dataclass(frozen=True)
class Coordinates:
    """
    Position of a single OSM node.
    """

    id: int
    lat: float          # degrees
    lon: float          # degrees
    on_footway: bool = False


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle (haversine) distance between two lat/lon points in miles."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_between(a: Coordinates, b: Coordinates) -> float:
    return distance_miles(a.lat, a.lon, b.lat, b.lon)
