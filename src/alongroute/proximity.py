"""Score, filter, deduplicate and rank candidates by distance to a route."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from alongroute.exceptions import InsufficientRouteLength
from alongroute.geo import min_distance_to_route
from alongroute.models import Candidate, Coordinate, ScoredCandidate

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 1000.0
DEFAULT_MAX_ROUTE_POINTS = 500

CandidateLike = Union[Candidate, ScoredCandidate]


def sample_route(
    route: Sequence[Coordinate], max_points: int = DEFAULT_MAX_ROUTE_POINTS
) -> list[Coordinate]:
    """
    Down-sample a dense route by keeping every k-th point.

    ``k = max(1, len(route) // max_points)``, so routes at or below the
    cap come back unchanged. The final point is always kept so the
    sampled polyline still ends where the route ends.
    """
    if max_points < 2:
        raise ValueError(f"max_points must be at least 2, got {max_points}")

    step = max(1, len(route) // max_points)
    if step == 1:
        return list(route)

    sampled = list(route[::step])
    if (len(route) - 1) % step:
        sampled.append(route[-1])
    logger.debug(
        "Sampled route from %d to %d points (step %d)",
        len(route), len(sampled), step,
    )
    return sampled


def score_candidates(
    route: Sequence[Coordinate], candidates: Iterable[CandidateLike]
) -> list[ScoredCandidate]:
    """Attach the minimum distance to *route* to every candidate, in order."""
    if len(route) < 2:
        raise InsufficientRouteLength(len(route))
    return [
        c.scored(min_distance_to_route(c.coordinate, route)) for c in candidates
    ]


def rank_candidates(
    scored: Iterable[ScoredCandidate], radius_m: float = DEFAULT_RADIUS_M
) -> list[ScoredCandidate]:
    """
    Keep candidates within *radius_m*, drop duplicate ids and sort.

    When ids collide the later entry's data wins, taking the position of
    the first occurrence. Sorting is stable, so equal distances keep
    their input order.
    """
    if radius_m < 0:
        raise ValueError(f"radius_m must be non-negative, got {radius_m}")

    within = [s for s in scored if s.distance_from_route <= radius_m]

    unique: dict = {}
    for s in within:
        unique[s.id] = s

    ranked = sorted(unique.values(), key=lambda s: s.distance_from_route)
    logger.debug(
        "%d candidate(s) within %.0f m, %d after dedup",
        len(within), radius_m, len(ranked),
    )
    return ranked


def filter_along_route(
    route: Sequence[Coordinate],
    candidates: Iterable[CandidateLike],
    radius_m: float = DEFAULT_RADIUS_M,
    max_route_points: Optional[int] = None,
) -> list[ScoredCandidate]:
    """
    Return candidates within *radius_m* of *route*, nearest first.

    If *max_route_points* is given, the route is down-sampled to roughly
    that many points before scoring. Raises InsufficientRouteLength if
    the route has fewer than two points, whether or not any candidates
    were supplied.
    """
    if len(route) < 2:
        raise InsufficientRouteLength(len(route))
    if max_route_points is not None:
        route = sample_route(route, max_route_points)

    scored = score_candidates(route, candidates)
    logger.debug(
        "Scored %d candidate(s) against %d route points", len(scored), len(route)
    )
    return rank_candidates(scored, radius_m)
