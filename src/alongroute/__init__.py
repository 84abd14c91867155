"""alongroute — Find points of interest along an encoded route polyline."""

from alongroute.client import AlongRoute
from alongroute.exceptions import (
    AlongRouteError,
    InsufficientRouteLength,
    InvalidPlacesResponse,
    MalformedPolyline,
    NoRouteFound,
)
from alongroute.models import Candidate, Coordinate, RouteData, ScoredCandidate

__all__ = [
    "AlongRoute",
    "Coordinate",
    "Candidate",
    "ScoredCandidate",
    "RouteData",
    "AlongRouteError",
    "MalformedPolyline",
    "InsufficientRouteLength",
    "NoRouteFound",
    "InvalidPlacesResponse",
]
