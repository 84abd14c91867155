"""Overpass query building and element-to-candidate conversion."""

from __future__ import annotations

from alongroute.exceptions import InvalidPlacesResponse
from alongroute.models import Candidate, Coordinate

# (key, value) tag filters for the facilities we look for
AMENITY_FILTERS = (
    ("amenity", "toilets"),
    ("amenity", "fuel"),
    ("amenity", "fast_food"),
    ("shop", "mall"),
)

_COPIED_TAGS = ("fee", "wheelchair", "opening_hours", "description")


def build_overpass_query(
    bbox: tuple[float, float, float, float], timeout: int = 25
) -> str:
    """Return Overpass QL selecting every filtered node inside *bbox*."""
    min_lat, min_lng, max_lat, max_lng = bbox
    area = f"({min_lat},{min_lng},{max_lat},{max_lng})"
    nodes = "\n".join(
        f'  node["{key}"="{value}"]{area};' for key, value in AMENITY_FILTERS
    )
    return (
        f"[out:json][timeout:{timeout}];\n"
        f"(\n{nodes}\n);\n"
        "out body;\n"
        ">;\n"
        "out skel qt;\n"
    )


def display_name(tags: dict) -> str:
    """Pick a human-readable name for an element from its tags."""
    if tags.get("name"):
        return tags["name"]
    amenity = tags.get("amenity")
    if amenity == "toilets":
        return "Public Toilet"
    return amenity or "Unnamed Facility"


def candidates_from_overpass(data: dict) -> list[Candidate]:
    """
    Convert the ``elements`` of an Overpass JSON response to candidates.

    Elements without both ``lat`` and ``lon`` (ways, relations, skeleton
    output) are skipped. Raises InvalidPlacesResponse if the response
    has no element list.
    """
    elements = data.get("elements")
    if not isinstance(elements, list):
        raise InvalidPlacesResponse("missing 'elements' list")

    candidates = []
    for el in elements:
        if el.get("lat") is None or el.get("lon") is None:
            continue
        tags = el.get("tags") or {}
        attributes = {
            "name": display_name(tags),
            "access": tags.get("access", "unknown"),
        }
        for key in _COPIED_TAGS:
            if key in tags:
                attributes[key] = tags[key]
        candidates.append(
            Candidate(
                id=el["id"],
                coordinate=Coordinate(float(el["lat"]), float(el["lon"])),
                attributes=attributes,
            )
        )
    return candidates
