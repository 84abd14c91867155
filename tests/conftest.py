"""Shared test fixtures — small routes, candidates and service payloads."""

import math

import pytest

from alongroute import AlongRoute
from alongroute.geo import EARTH_RADIUS_M
from alongroute.models import Candidate, Coordinate

# Meters spanned by one degree of latitude on the model sphere
METERS_PER_DEGREE = EARTH_RADIUS_M * math.pi / 180

CANONICAL_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def north_of_midpoint(meters: float) -> Coordinate:
    """A point *meters* due north of (0, 0.5), the equator route's midpoint."""
    return Coordinate(meters / METERS_PER_DEGREE, 0.5)


@pytest.fixture()
def equator_route() -> list[Coordinate]:
    """A one-degree segment of longitude along the equator."""
    return [Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)]


@pytest.fixture()
def candidates() -> list[Candidate]:
    """Three facilities at 500 m, 1500 m and 200 m from the equator route."""
    return [
        Candidate(1, north_of_midpoint(500), {"name": "Fuel Stop"}),
        Candidate(2, north_of_midpoint(1500), {"name": "Far Mall"}),
        Candidate(3, north_of_midpoint(200), {"name": "Roadside WC"}),
    ]


@pytest.fixture()
def route_response() -> dict:
    """A routing-service body whose geometry is the canonical polyline."""
    return {
        "code": "Ok",
        "routes": [
            {
                "geometry": CANONICAL_POLYLINE,
                "distance": 812345.6,
                "duration": 30123.4,
            }
        ],
    }


@pytest.fixture()
def places_response() -> dict:
    """An Overpass body with nodes near, far from, and beside the route."""
    return {
        "elements": [
            {
                "type": "node",
                "id": 101,
                "lat": 38.5,
                "lon": -120.2,
                "tags": {"amenity": "toilets", "access": "yes", "fee": "no"},
            },
            {
                "type": "node",
                "id": 102,
                "lat": 40.7,
                "lon": -120.945,
                "tags": {"amenity": "fuel", "name": "Summit Gas"},
            },
            {
                "type": "node",
                "id": 103,
                "lat": 39.0,
                "lon": -118.0,
                "tags": {"shop": "mall"},
            },
            {"type": "way", "id": 104, "nodes": [1, 2, 3]},
        ]
    }


@pytest.fixture()
def client() -> AlongRoute:
    return AlongRoute()


@pytest.fixture()
def at_distance():
    """Factory for points a given number of meters north of the route midpoint."""
    return north_of_midpoint


@pytest.fixture()
def canonical_polyline() -> str:
    """The worked example from the polyline algorithm documentation."""
    return CANONICAL_POLYLINE
