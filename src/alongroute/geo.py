"""Great-circle distances and point-to-polyline proximity."""

from __future__ import annotations

import math
from typing import Sequence

from alongroute.exceptions import InsufficientRouteLength
from alongroute.models import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def haversine(a: Coordinate, b: Coordinate) -> float:
    """Surface distance in meters between *a* and *b* on a spherical Earth."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)

    h = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def point_to_segment_distance(
    p: Coordinate, v: Coordinate, w: Coordinate
) -> float:
    """
    Distance in meters from *p* to the closest point of segment *v*-*w*.

    The projection parameter is computed treating lat/lng as planar
    Cartesian coordinates; only the final distance is great-circle.
    A zero-length segment reduces to ``haversine(p, v)``.
    """
    d_lat = w.lat - v.lat
    d_lng = w.lng - v.lng
    l2 = d_lat * d_lat + d_lng * d_lng
    if l2 == 0:
        return haversine(p, v)

    t = ((p.lat - v.lat) * d_lat + (p.lng - v.lng) * d_lng) / l2
    t = max(0.0, min(1.0, t))
    projection = Coordinate(v.lat + t * d_lat, v.lng + t * d_lng)
    return haversine(p, projection)


def min_distance_to_route(point: Coordinate, route: Sequence[Coordinate]) -> float:
    """
    Minimum distance in meters from *point* to any segment of *route*.

    Raises InsufficientRouteLength if the route has fewer than two
    points, since no segment exists to measure against.
    """
    if len(route) < 2:
        raise InsufficientRouteLength(len(route))
    return min(
        point_to_segment_distance(point, route[i], route[i + 1])
        for i in range(len(route) - 1)
    )


def bounding_box(
    coordinates: Sequence[Coordinate], buffer_deg: float = 0.0
) -> tuple[float, float, float, float]:
    """
    Return (min_lat, min_lng, max_lat, max_lng) padded by *buffer_deg*.

    Raises InsufficientRouteLength for an empty sequence.
    """
    if not coordinates:
        raise InsufficientRouteLength(0, required=1)
    lats = [c.lat for c in coordinates]
    lngs = [c.lng for c in coordinates]
    return (
        min(lats) - buffer_deg,
        min(lngs) - buffer_deg,
        max(lats) + buffer_deg,
        max(lngs) + buffer_deg,
    )
