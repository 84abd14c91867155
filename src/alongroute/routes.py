"""Parse routing-service (OSRM-style) route responses into RouteData."""

from __future__ import annotations

from alongroute import polyline
from alongroute.exceptions import NoRouteFound
from alongroute.geo import bounding_box
from alongroute.models import RouteData

# Roughly 2 km of padding around the route for the places query
DEFAULT_BBOX_BUFFER_DEG = 0.02


def parse_route_response(
    data: dict,
    precision: int = polyline.DEFAULT_PRECISION,
    buffer_deg: float = DEFAULT_BBOX_BUFFER_DEG,
) -> RouteData:
    """
    Build a RouteData from the first route of a decoded JSON response.

    The response is expected to have been requested with
    ``geometries=polyline`` so that ``geometry`` is an encoded string.
    Raises NoRouteFound if the router reported an error or no routes,
    and MalformedPolyline if the geometry cannot be decoded.
    """
    code = data.get("code")
    routes = data.get("routes") or []
    if code != "Ok" or not routes:
        raise NoRouteFound(code, data.get("message", ""))

    route = routes[0]
    coordinates = tuple(polyline.decode(route.get("geometry", ""), precision))
    return RouteData(
        coordinates=coordinates,
        distance_m=float(route.get("distance", 0.0)),
        duration_s=float(route.get("duration", 0.0)),
        bbox=bounding_box(coordinates, buffer_deg),
    )
