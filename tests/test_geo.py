"""Tests for alongroute.geo module."""

import math

import pytest

from alongroute.exceptions import InsufficientRouteLength
from alongroute.geo import (
    EARTH_RADIUS_M,
    bounding_box,
    haversine,
    min_distance_to_route,
    point_to_segment_distance,
)
from alongroute.models import Coordinate

ONE_DEGREE_M = EARTH_RADIUS_M * math.pi / 180


class TestHaversine:
    def test_same_point_is_zero(self):
        p = Coordinate(51.5034, -0.1276)
        assert haversine(p, p) == 0.0

    def test_one_degree_latitude(self):
        d = haversine(Coordinate(0.0, 0.5), Coordinate(1.0, 0.5))
        assert d == pytest.approx(111_195, abs=1)

    def test_symmetric(self):
        a = Coordinate(38.5, -120.2)
        b = Coordinate(43.252, -126.453)
        assert haversine(a, b) == pytest.approx(haversine(b, a))

    def test_antipodal(self):
        d = haversine(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
        assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


class TestPointToSegment:
    def test_point_on_segment(self):
        d = point_to_segment_distance(
            Coordinate(0.0, 0.5), Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)
        )
        assert d < 1e-6

    def test_perpendicular_offset(self):
        d = point_to_segment_distance(
            Coordinate(1.0, 0.5), Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)
        )
        assert d == pytest.approx(ONE_DEGREE_M)

    def test_projection_clamped_to_start(self):
        p = Coordinate(0.0, -2.0)
        v = Coordinate(0.0, 0.0)
        d = point_to_segment_distance(p, v, Coordinate(0.0, 1.0))
        assert d == haversine(p, v)

    def test_projection_clamped_to_end(self):
        p = Coordinate(0.5, 3.0)
        w = Coordinate(0.0, 1.0)
        d = point_to_segment_distance(p, Coordinate(0.0, 0.0), w)
        assert d == haversine(p, w)

    @pytest.mark.parametrize(
        "p",
        [Coordinate(0.0, 0.0), Coordinate(10.0, 20.0), Coordinate(-45.0, 170.0)],
    )
    def test_degenerate_segment_is_haversine(self, p: Coordinate):
        v = Coordinate(1.25, -3.5)
        assert point_to_segment_distance(p, v, v) == haversine(p, v)

    def test_projection_uses_degree_space(self):
        # At 60°N a degree of longitude is half a degree of latitude on the
        # ground, but t is still computed in raw degrees.
        v = Coordinate(60.0, 0.0)
        w = Coordinate(61.0, 1.0)
        p = Coordinate(60.0, 1.0)
        expected = haversine(p, Coordinate(60.5, 0.5))
        assert point_to_segment_distance(p, v, w) == expected


class TestMinDistanceToRoute:
    def test_on_route(self, equator_route):
        assert min_distance_to_route(Coordinate(0.0, 0.5), equator_route) < 1e-6

    def test_off_route(self, equator_route):
        d = min_distance_to_route(Coordinate(1.0, 0.5), equator_route)
        assert d == pytest.approx(111_195, abs=1)

    def test_takes_minimum_over_segments(self):
        route = [Coordinate(0.0, 0.0), Coordinate(0.0, 1.0), Coordinate(1.0, 1.0)]
        p = Coordinate(0.5, 1.1)
        expected = point_to_segment_distance(p, route[1], route[2])
        assert min_distance_to_route(p, route) == expected

    def test_on_vertex_of_multi_segment_route(self):
        route = [Coordinate(0.0, 0.0), Coordinate(0.0, 1.0), Coordinate(1.0, 1.0)]
        assert min_distance_to_route(Coordinate(0.0, 1.0), route) == 0.0

    def test_zero_length_segments_allowed(self):
        route = [Coordinate(0.0, 0.0), Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)]
        assert min_distance_to_route(Coordinate(0.0, 0.5), route) < 1e-6

    @pytest.mark.parametrize("route", [[], [Coordinate(0.0, 0.0)]])
    def test_short_route_raises(self, route):
        with pytest.raises(InsufficientRouteLength) as exc_info:
            min_distance_to_route(Coordinate(0.0, 0.0), route)
        assert exc_info.value.length == len(route)
        assert exc_info.value.required == 2


class TestBoundingBox:
    def test_bounds(self):
        coords = [Coordinate(38.5, -120.2), Coordinate(43.252, -126.453)]
        assert bounding_box(coords) == (38.5, -126.453, 43.252, -120.2)

    def test_buffer(self):
        box = bounding_box([Coordinate(1.0, 2.0)], buffer_deg=0.5)
        assert box == (0.5, 1.5, 1.5, 2.5)

    def test_empty_raises(self):
        with pytest.raises(InsufficientRouteLength) as exc_info:
            bounding_box([])
        assert exc_info.value.required == 1
