"""Encoded polyline (Google polyline algorithm) decoding and encoding."""

from __future__ import annotations

import logging
from typing import Iterable

import polyline

from alongroute.exceptions import MalformedPolyline
from alongroute.models import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 5

_BIAS = 63
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20
_MAX_CHAR = _BIAS + 0x3F  # '~'


def precision_factor(precision: int) -> int:
    """Return 10 ** precision; raises ValueError unless precision is an int >= 0."""
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"precision must be an integer, got {precision!r}")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return 10 ** precision


def _read_value(encoded: str, index: int, axis: str) -> tuple[int, int]:
    """
    Read one variable-length signed value starting at *index*.

    Returns (value, next_index). Raises MalformedPolyline if the string
    ends before a byte without the continuation bit is seen.
    """
    length = len(encoded)
    shift = 0
    result = 0
    while True:
        if index >= length:
            reason = (
                f"string ends inside the {axis} value"
                if shift
                else f"missing {axis} value"
            )
            raise MalformedPolyline(encoded, index, reason)
        code = ord(encoded[index])
        if code < _BIAS or code > _MAX_CHAR:
            raise MalformedPolyline(
                encoded, index, f"character {encoded[index]!r} out of range"
            )
        byte = code - _BIAS
        index += 1
        result |= (byte & _CHUNK_MASK) << shift
        shift += 5
        if not byte & _CONTINUATION:
            break

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> list[Coordinate]:
    """
    Decode *encoded* into an ordered list of coordinates.

    Coordinates are scaled down by ``10 ** precision``. An empty string
    decodes to an empty list. Raises MalformedPolyline if the string is
    truncated or holds a character outside the encoding alphabet; no
    partial result is returned.
    """
    factor = precision_factor(precision)
    coordinates: list[Coordinate] = []
    index = lat = lng = 0

    while index < len(encoded):
        lat_change, index = _read_value(encoded, index, "latitude")
        lng_change, index = _read_value(encoded, index, "longitude")
        lat += lat_change
        lng += lng_change
        coordinates.append(Coordinate(lat / factor, lng / factor))

    logger.debug(
        "Decoded %d coordinates from %d characters", len(coordinates), len(encoded)
    )
    return coordinates


def encode(
    coordinates: Iterable[Coordinate], precision: int = DEFAULT_PRECISION
) -> str:
    """Encode *coordinates* as a polyline string; the inverse of decode()."""
    precision_factor(precision)
    return polyline.encode([(c.lat, c.lng) for c in coordinates], precision)
