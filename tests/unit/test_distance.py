"""Unit tests for distance queries."""

import math

import pytest

from shapelab.core.distance import (
    closest_point_on_segment,
    closest_poly_point,
    dist_to_line,
    dist_to_segment,
    vector_proj,
)
from shapelab.domain import Point


class TestVectorProjection:
    """Tests for vector_proj and dist_to_line."""

    def test_projection(self):
        assert vector_proj(Point(3, 4), Point(2, 0)) == Point(3, 0)

    def test_projection_on_zero_vector(self):
        assert vector_proj(Point(3, 4), Point(0, 0)) == Point(0, 0)

    def test_dist_to_line(self):
        assert dist_to_line(Point(1, 3), Point(0, 0), Point(2, 0)) == 3.0

    def test_dist_to_line_beyond_points(self):
        """The line is infinite, so points past its anchor are measured perpendicularly."""
        assert dist_to_line(Point(10, -2), Point(0, 0), Point(1, 0)) == 2.0

    def test_dist_to_line_zero_direction(self):
        assert dist_to_line(Point(3, 4), Point(0, 0), Point(0, 0)) == 5.0

    def test_dist_to_diagonal_line(self):
        d = dist_to_line(Point(0, 2), Point(0, 0), Point(1, 1))
        assert d == pytest.approx(math.sqrt(2))


class TestDistToSegment:
    """Tests for dist_to_segment."""

    @pytest.fixture
    def segment(self):
        return Point(0, 0), Point(2, 0)

    def test_middle(self, segment):
        assert dist_to_segment(Point(1, 1), *segment) == 1.0

    def test_before_start(self, segment):
        assert dist_to_segment(Point(-3, 4), *segment) == 5.0

    def test_past_end(self, segment):
        assert dist_to_segment(Point(5, 0), *segment) == 3.0

    def test_on_segment(self, segment):
        assert dist_to_segment(Point(1.5, 0), *segment) == 0.0

    def test_zero_length_segment(self):
        """A zero-length segment measures the distance to its single point."""
        p = Point(3, 4)
        a = Point(0, 0)
        assert dist_to_segment(p, a, a) == p.distance_to(a) == 5.0

    def test_reversed_segment(self, segment):
        a, b = segment
        for p in [Point(-3, 4), Point(1, 1), Point(5, -2)]:
            assert dist_to_segment(p, a, b) == pytest.approx(dist_to_segment(p, b, a))


class TestClosestPoints:
    """Tests for closest point queries."""

    def test_closest_point_on_segment(self):
        assert closest_point_on_segment(Point(1, 5), Point(0, 0), Point(2, 0)) == Point(1, 0)

    def test_closest_point_clamped(self):
        assert closest_point_on_segment(Point(-1, 1), Point(0, 0), Point(2, 0)) == Point(0, 0)
        assert closest_point_on_segment(Point(9, 1), Point(0, 0), Point(2, 0)) == Point(2, 0)

    def test_closest_point_zero_length(self):
        a = Point(1, 1)
        assert closest_point_on_segment(Point(5, 5), a, a) == a

    def test_closest_poly_point_outside(self):
        square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        assert closest_poly_point(Point(1, -3), square) == Point(1, 0)

    def test_closest_poly_point_inside(self):
        square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        assert closest_poly_point(Point(1, 0.5), square) == Point(1, 0)

    def test_closest_poly_point_corner(self):
        square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        assert closest_poly_point(Point(3, 3), square) == Point(2, 2)

    def test_closest_poly_point_empty(self):
        with pytest.raises(ValueError, match="at least 1 point"):
            closest_poly_point(Point(0, 0), [])
