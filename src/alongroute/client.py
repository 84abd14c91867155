"""AlongRoute client — the main entry point for the library."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from alongroute import polyline, proximity
from alongroute.geo import min_distance_to_route
from alongroute.models import Candidate, Coordinate, ScoredCandidate
from alongroute.places import candidates_from_overpass
from alongroute.routes import parse_route_response

logger = logging.getLogger(__name__)


class AlongRoute:
    """
    Finds points of interest that lie along a travel route.

    Holds the query configuration (search radius, route down-sampling
    cap, polyline precision); every method is otherwise a pure function
    of its arguments, so one instance can be shared freely.
    """

    def __init__(
        self,
        radius_m: float = proximity.DEFAULT_RADIUS_M,
        max_route_points: Optional[int] = proximity.DEFAULT_MAX_ROUTE_POINTS,
        precision: int = polyline.DEFAULT_PRECISION,
    ):
        if radius_m < 0:
            raise ValueError(f"radius_m must be non-negative, got {radius_m}")
        if max_route_points is not None and max_route_points < 2:
            raise ValueError(
                f"max_route_points must be at least 2, got {max_route_points}"
            )
        polyline.precision_factor(precision)
        self.radius_m = radius_m
        self.max_route_points = max_route_points
        self.precision = precision

    # ── Public API ────────────────────────────────────────────────

    def decode(self, encoded: str) -> list[Coordinate]:
        """Decode an encoded polyline at the configured precision."""
        return polyline.decode(encoded, self.precision)

    def distance_to_route(
        self, point: Coordinate, route: Sequence[Coordinate]
    ) -> float:
        """
        Minimum distance in meters from *point* to the full route.

        Raises InsufficientRouteLength for routes under two points.
        """
        return min_distance_to_route(point, route)

    def find_along_route(
        self,
        route: Sequence[Coordinate] | str,
        candidates: Iterable[Candidate],
    ) -> list[ScoredCandidate]:
        """
        Rank *candidates* by proximity to *route*, nearest first.

        *route* may be a coordinate sequence or an encoded polyline.
        Returns only candidates within the configured radius, one per id.
        """
        if isinstance(route, str):
            route = self.decode(route)
        return proximity.filter_along_route(
            route,
            candidates,
            radius_m=self.radius_m,
            max_route_points=self.max_route_points,
        )

    def find_from_responses(
        self, route_response: dict, places_response: dict
    ) -> list[ScoredCandidate]:
        """
        Run the whole query over already-fetched service payloads.

        *route_response* is a routing-service JSON body with polyline
        geometry; *places_response* an Overpass JSON body.
        """
        route = parse_route_response(route_response, self.precision)
        candidates = candidates_from_overpass(places_response)
        logger.debug(
            "Route of %d points, %.0f m; %d candidate(s) from places service",
            len(route.coordinates), route.distance_m, len(candidates),
        )
        return self.find_along_route(route.coordinates, candidates)
