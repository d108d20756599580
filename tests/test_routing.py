"""
Tests for predecessor sentinels and route reconstruction.
"""

import math

import pytest

from routing import (
    Predecessor,
    Route,
    ShortestPaths,
    UnreachableDestinationError,
    reconstruct_path,
)


def test_reconstruct_follows_links_back_to_start():
    prev = {"S": Predecessor.ROOT, "A": "S", "B": "A", "C": "B"}

    assert reconstruct_path(prev, "S", "C") == ["S", "A", "B", "C"]


def test_reconstruct_stops_at_start_not_at_sentinel():
    # Start's own entry is never consulted, whatever it holds.
    prev = {"S": "garbage", "A": "S"}

    assert reconstruct_path(prev, "S", "A") == ["S", "A"]


def test_reconstruct_reports_unreachable_destination():
    prev = {"S": Predecessor.ROOT, "A": "S", "U": Predecessor.NONE}

    with pytest.raises(UnreachableDestinationError) as excinfo:
        reconstruct_path(prev, "S", "U")

    assert excinfo.value.start == "S"
    assert excinfo.value.destination == "U"


def test_reconstruct_unknown_destination_is_unreachable():
    prev = {"S": Predecessor.ROOT}

    with pytest.raises(UnreachableDestinationError):
        reconstruct_path(prev, "S", "missing")


def test_unreachable_error_is_a_lookup_error():
    assert issubclass(UnreachableDestinationError, LookupError)


def test_shortest_paths_unpacks_and_builds_routes():
    result = ShortestPaths(
        start=1,
        distances={1: 0.0, 2: 1.5, 3: math.inf},
        predecessors={1: Predecessor.ROOT, 2: 1, 3: Predecessor.NONE},
    )

    dist, prev = result
    assert dist is result.distances
    assert prev is result.predecessors

    route = result.route_to(2)
    assert route == Route(vertices=[1, 2], distance=1.5)
    assert route.start == 1
    assert route.destination == 2
    assert str(route) == "1->2"

    assert result.route_to(3) is None
    assert result.distance_to(3) == math.inf
    assert result.distance_to(99) == math.inf
    assert result.is_reachable(2)
    assert not result.is_reachable(3)


def test_sentinels_never_equal_vertex_labels():
    for label in (0, -1, "root", "none", None):
        assert Predecessor.ROOT != label
        assert Predecessor.NONE != label
