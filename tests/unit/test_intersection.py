"""Unit tests for polygon and circle intersection tests."""

import pytest

from shapelab.config import IntersectionMethod
from shapelab.core.intersection import (
    circles_intersect,
    convex_poly_circle_intersect,
    convex_polys_intersect,
    convex_polys_intersect_edges,
    shapes_intersect,
)
from shapelab.domain import Circle, IsoscelesTriangle, Point, Rectangle


def square(x: float, y: float, size: float) -> list[Point]:
    """Axis-aligned square with its top-left corner at (x, y)."""
    return [
        Point(x, y),
        Point(x + size, y),
        Point(x + size, y + size),
        Point(x, y + size),
    ]


POLYGON_TESTS = [convex_polys_intersect, convex_polys_intersect_edges]


@pytest.mark.parametrize("intersects", POLYGON_TESTS)
class TestConvexPolygons:
    """Both polygon algorithms must give the same answers."""

    def test_overlapping_squares(self, intersects):
        assert intersects(square(0, 0, 2), square(1, 1, 2))

    def test_separated_squares(self, intersects):
        assert not intersects(square(0, 0, 2), square(10, 10, 2))
        assert not intersects(square(0, 0, 2), square(3, 0, 2))

    def test_nested(self, intersects):
        """A polygon inside another intersects it although no edges cross."""
        outer = square(0, 0, 10)
        inner = square(4, 4, 2)
        assert intersects(outer, inner)
        assert intersects(inner, outer)

    def test_touching_edge(self, intersects):
        assert intersects(square(0, 0, 2), square(2, 0, 2))

    def test_touching_corner(self, intersects):
        assert intersects(square(0, 0, 2), square(2, 2, 2))

    def test_bounding_boxes_overlap_but_separated(self, intersects):
        """Triangles separated by the hypotenuse axis only."""
        a = [Point(0, 0), Point(4, 0), Point(0, 4)]
        b = [Point(3, 3), Point(5, 3), Point(3, 5)]
        assert not intersects(a, b)
        assert not intersects(b, a)

    def test_order_invariant(self, intersects):
        a = [Point(0, 0), Point(4, 0), Point(2, 3)]
        b = [Point(1, 1), Point(5, 1), Point(5, 5), Point(1, 5)]
        assert intersects(a, b) == intersects(b, a)

    def test_winding_invariant(self, intersects):
        a = square(0, 0, 2)
        b = square(1, 1, 2)
        assert intersects(list(reversed(a)), b)
        assert not intersects(list(reversed(a)), square(5, 5, 1))


class TestCircles:
    """Tests for circle intersections."""

    def test_circles_separated(self):
        assert not circles_intersect(Point(0, 0), 5.0, Point(8, 0), 2.0)

    def test_circles_overlapping(self):
        assert circles_intersect(Point(0, 0), 5.0, Point(8, 0), 4.0)

    def test_circles_touching(self):
        assert circles_intersect(Point(0, 0), 5.0, Point(8, 0), 3.0)

    def test_concentric(self):
        assert circles_intersect(Point(1, 1), 5.0, Point(1, 1), 1.0)

    def test_center_inside_polygon(self):
        assert convex_poly_circle_intersect(Point(1, 1), 0.1, square(0, 0, 2))

    def test_circle_touching_edge(self):
        assert convex_poly_circle_intersect(Point(3, 1), 1.0, square(0, 0, 2))

    def test_circle_near_edge(self):
        assert not convex_poly_circle_intersect(Point(3.5, 1), 1.0, square(0, 0, 2))

    def test_circle_near_corner(self):
        """Distance to the corner (2, 2) is sqrt(2)."""
        assert convex_poly_circle_intersect(Point(3, 3), 1.5, square(0, 0, 2))
        assert not convex_poly_circle_intersect(Point(3, 3), 1.4, square(0, 0, 2))

    def test_polygon_inside_circle(self):
        assert convex_poly_circle_intersect(Point(1, 1), 100.0, square(0, 0, 2))


class TestShapesIntersect:
    """Tests for dispatch over anchored shapes."""

    @pytest.fixture
    def unit_rect(self):
        """Square spanning -1..1 on both axes."""
        return Rectangle.from_size(Point(0, 0), 1, 1)

    def test_rectangle_corners(self, unit_rect):
        assert unit_rect.polygon == [Point(1, 1), Point(1, -1), Point(-1, -1), Point(-1, 1)]

    @pytest.mark.parametrize("method", list(IntersectionMethod))
    def test_rectangle_circle(self, unit_rect, method):
        assert shapes_intersect(unit_rect, Circle.from_radius(Point(3, 0), 2), method)
        assert shapes_intersect(Circle.from_radius(Point(3, 0), 2), unit_rect, method)
        assert not shapes_intersect(unit_rect, Circle.from_radius(Point(3.5, 0), 2), method)

    @pytest.mark.parametrize("method", list(IntersectionMethod))
    def test_triangle_rectangle(self, unit_rect, method):
        above = IsoscelesTriangle(base_point=Point(0, 3), opposite_vertex=Point(0, 1.5))
        poking = IsoscelesTriangle(base_point=Point(0, 3), opposite_vertex=Point(0, 0.5))
        assert not shapes_intersect(above, unit_rect, method)
        assert shapes_intersect(poking, unit_rect, method)

    def test_circle_circle(self):
        a = Circle.from_radius(Point(100, 410), 50)
        b = Circle.from_radius(Point(250, 410), 50)
        assert not shapes_intersect(a, b)
        b.drag_anchor(0, Point(-60, 0))
        assert shapes_intersect(a, b)


class TestDemoScenarios:
    """Layouts taken from the interactive demo."""

    @pytest.mark.parametrize("intersects", POLYGON_TESTS)
    def test_overlapping_triangles(self, intersects):
        a = [Point(0, 0), Point(4, 0), Point(2, 3)]
        b = [Point(2, 1), Point(6, 1), Point(4, 4)]
        assert intersects(a, b)

    @pytest.mark.parametrize("intersects", POLYGON_TESTS)
    def test_far_apart_triangles(self, intersects):
        a = [Point(0, 0), Point(1, 0), Point(0, 1)]
        b = [Point(10, 10), Point(11, 10), Point(10, 11)]
        assert not intersects(a, b)

    def test_default_layout_circles(self):
        assert not circles_intersect(Point(100, 410), 50, Point(250, 410), 50)
        assert circles_intersect(Point(100, 410), 50, Point(190, 410), 50)
