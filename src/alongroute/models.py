"""Typed value models for alongroute."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Union

CandidateId = Union[str, int]


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees. Range is not enforced."""

    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Candidate:
    """
    A point of interest to be matched against a route.

    Only ``id`` and ``coordinate`` are read by the distance pipeline;
    ``attributes`` carries whatever the upstream source supplied and is
    left out of the hash, so candidates stay hashable with dict attributes.
    """

    id: CandidateId
    coordinate: Coordinate
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def scored(self, distance: float) -> ScoredCandidate:
        """Attach a distance-from-route (meters) to this candidate."""
        return ScoredCandidate(
            id=self.id,
            coordinate=self.coordinate,
            distance_from_route=distance,
            attributes=self.attributes,
        )

    def to_dict(self) -> dict:
        return {
            **dict(self.attributes),
            "id": self.id,
            "lat": self.coordinate.lat,
            "lng": self.coordinate.lng,
        }


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate together with its minimum distance to a route."""

    id: CandidateId
    coordinate: Coordinate
    distance_from_route: float   # meters
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def scored(self, distance: float) -> ScoredCandidate:
        """Return a copy carrying a freshly computed distance."""
        return replace(self, distance_from_route=distance)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            **dict(self.attributes),
            "id": self.id,
            "lat": self.coordinate.lat,
            "lng": self.coordinate.lng,
            "distance_from_route": round(self.distance_from_route, 1),
        }


@dataclass(frozen=True)
class RouteData:
    """A route geometry plus the summary figures the router reported."""

    coordinates: tuple[Coordinate, ...]
    distance_m: float
    duration_s: float
    bbox: tuple[float, float, float, float]  # min_lat, min_lng, max_lat, max_lng

    def to_dict(self) -> dict:
        return {
            "coordinates": [c.to_dict() for c in self.coordinates],
            "distance_m": self.distance_m,
            "duration_s": self.duration_s,
            "bbox": list(self.bbox),
        }
