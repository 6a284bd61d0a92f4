"""Orientation and containment predicates.

This module provides the exact (epsilon-free) predicates the intersection
code is built on:
- Orientation of three points (sign of a 3x3 determinant)
- Segment intersection, with and without endpoint/collinear contacts
- Point in convex polygon (consistent orientation)
- Point in simple polygon (parity ray casting)
- Signed area, barycentric coordinates and edge midpoints

Coordinates are screen coordinates (y grows downwards), which flips the
usual meaning of the orientation sign: +1 is clockwise on screen. The
predicates only compare signs, so they work for either winding.

All functions are pure and stateless.
"""

import logging
import math
from collections.abc import Sequence

from shapelab.domain import Point
from shapelab.exceptions import InvalidPolygonError

logger = logging.getLogger(__name__)


def _sign(value: float) -> int:
    if value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


def orient(a: Point, b: Point, c: Point) -> int:
    """Return the orientation of the triangle a, b, c.

    Computed as the sign of the determinant

        | 1  ax  ay |
        | 1  bx  by |
        | 1  cx  cy |

    which equals the sign of the cross product (b - a) x (c - a).

    Args:
        a: First point
        b: Second point
        c: Third point

    Returns:
        1 or -1 for the two turning directions, 0 if the points are collinear

    Examples:
        >>> orient(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        1
        >>> orient(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0))
        0
    """
    return _sign((b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x))


def _within_extent(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Check that collinear segments a-b and c-d share at least one point."""
    return (
        max(min(a.x, b.x), min(c.x, d.x)) <= min(max(a.x, b.x), max(c.x, d.x))
        and max(min(a.y, b.y), min(c.y, d.y)) <= min(max(a.y, b.y), max(c.y, d.y))
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return True iff segments a-b and c-d share at least one point.

    Uses the straddle test: c and d lie on different sides of the line a-b
    and a and b lie on different sides of the line c-d. When all four
    orientations are zero the segments are collinear, and they intersect
    iff their extents overlap (touching endpoints included).

    Args:
        a: Start of the first segment
        b: End of the first segment
        c: Start of the second segment
        d: End of the second segment

    Returns:
        True if the segments intersect or touch

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0))
        True
    """
    o1 = orient(a, b, c)
    o2 = orient(a, b, d)
    o3 = orient(c, d, a)
    o4 = orient(c, d, b)

    if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
        return _within_extent(a, b, c, d)

    return o1 != o2 and o3 != o4


def segments_intersect_proper(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return True iff segments a-b and c-d cross at a point interior to both.

    Shared endpoints, an endpoint touching the other segment and collinear
    overlaps are not proper intersections.

    Args:
        a: Start of the first segment
        b: End of the first segment
        c: Start of the second segment
        d: End of the second segment

    Returns:
        True if the segments cross properly
    """
    return (
        abs(orient(a, b, c) - orient(a, b, d)) == 2
        and abs(orient(c, d, a) - orient(c, d, b)) == 2
    )


def line_line_intersection(p1: Point, v1: Point, p2: Point, v2: Point) -> Point | None:
    """Intersect the lines p1 + t*v1 and p2 + u*v2.

    Args:
        p1: Point on the first line
        v1: Direction of the first line
        p2: Point on the second line
        v2: Direction of the second line

    Returns:
        The intersection point, or None if the lines are parallel
    """
    denom = v1.cross(v2)
    if denom == 0.0:
        return None
    t = (p2 - p1).cross(v2) / denom
    return p1 + v1.scale(t)


def segment_intersection_point(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Find the point where segments a-b and c-d cross.

    Args:
        a: Start of the first segment
        b: End of the first segment
        c: Start of the second segment
        d: End of the second segment

    Returns:
        The crossing point, or None if the segments do not intersect or are
        collinear (no unique crossing point)
    """
    if not segments_intersect(a, b, c, d):
        return None
    return line_line_intersection(a, b - a, c, d - c)


def _is_degenerate(poly: Sequence[Point]) -> bool:
    """Check whether all vertices lie on one line."""
    first = poly[0]
    if all(p.x == first.x for p in poly) or all(p.y == first.y for p in poly):
        return True
    for i in range(1, len(poly)):
        if poly[i] != first:
            return all(orient(first, poly[i], p) == 0 for p in poly)
    return True


def point_in_convex_poly(p: Point, poly: Sequence[Point]) -> bool:
    """Return True iff p lies strictly inside the convex polygon poly.

    The orientation of p against the first edge is taken as reference; p is
    inside iff every other edge yields the same orientation. Points on the
    boundary are reported as outside. Degenerate polygons (all vertices on
    one line) contain no point.

    The result is undefined for non-convex polygons.

    Args:
        p: The point to test
        poly: Vertices of a convex polygon, in either winding

    Returns:
        True if the point is inside the polygon

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> point_in_convex_poly(Point(1, 1), square)
        True
        >>> point_in_convex_poly(Point(3, 1), square)
        False
    """
    n = len(poly)
    if n < 3 or _is_degenerate(poly):
        return False

    reference = orient(poly[0], poly[1], p)
    for i in range(1, n):
        if orient(poly[i], poly[(i + 1) % n], p) != reference:
            return False
    return True


def point_in_poly(p: Point, poly: Sequence[Point]) -> bool:
    """Return True iff p lies inside the simple polygon poly.

    Parity test along the ray from p in the +x direction. Each vertex is
    classified by its y orientation relative to p (above, on, below the
    ray). An edge is counted when the segment from p to a far point on the
    ray crosses it. When the ray passes exactly through a vertex, the next
    vertex off the ray decides whether the boundary is actually crossed or
    only touched, so each vertex is counted at most once.

    Args:
        p: The point to test
        poly: Vertices of a simple (possibly non-convex) polygon

    Returns:
        True if the number of crossings is odd

    Examples:
        >>> triangle = [Point(0, 0), Point(2, 0), Point(1, 2)]
        >>> point_in_poly(Point(1, 1), triangle)
        True
        >>> point_in_poly(Point(5, 5), triangle)
        False
    """
    n = len(poly)
    if n < 3:
        return False

    py = p.y

    def y_orient(q: Point) -> int:
        return _sign(q.y - py)

    prev = poly[n - 1]
    prev_y_or = y_orient(prev)
    count = 0

    for i in range(n):
        q = poly[i]
        y_or = y_orient(q)
        if abs(y_or - prev_y_or) >= 1:
            # Edge prev-q reaches the ray's y; check the crossing is right of p
            far = Point(max(prev.x, q.x) + 1.0, py)
            if abs(orient(prev, q, p) - orient(prev, q, far)) == 2:
                if y_or == 0:
                    # Ray goes through q: crossed only if the boundary
                    # continues to the other side
                    next_y_or = 0
                    for k in range(1, n):
                        next_y_or = y_orient(poly[(i + k) % n])
                        if next_y_or != 0:
                            break
                    if abs(next_y_or - prev_y_or) == 2:
                        count += 1
                elif prev_y_or != 0:
                    count += 1
        prev = q
        prev_y_or = y_or

    return count % 2 == 1


def polygon_area(poly: Sequence[Point]) -> float:
    """Signed area of a polygon (sum of trapezoids against the x axis).

    In standard y-up coordinates a counter-clockwise polygon has positive
    area; on screen (y down) the same vertex list appears clockwise.

    Args:
        poly: Polygon vertices

    Returns:
        Signed area. Returns 0.0 for fewer than 3 vertices.
    """
    n = len(poly)
    if n < 3:
        return 0.0

    prev = poly[n - 1]
    area = 0.0
    for q in poly:
        area += (prev.x - q.x) * (q.y + prev.y)
        prev = q
    return area / 2.0


def barycentric(p: Point, a: Point, b: Point, c: Point) -> tuple[float, float, float]:
    """Barycentric coordinates of p with respect to triangle a, b, c.

    Args:
        p: The point
        a: First triangle vertex
        b: Second triangle vertex
        c: Third triangle vertex

    Returns:
        Weights (wc, wa, wb) of the sub-triangles opposite c, a and b, which
        sum to 1

    Raises:
        ValueError: If the triangle has zero area
    """
    total = polygon_area([a, b, c])
    if total == 0.0:
        raise ValueError("Cannot compute barycentric coordinates of a degenerate triangle")
    return (
        polygon_area([a, b, p]) / total,
        polygon_area([b, c, p]) / total,
        polygon_area([c, a, p]) / total,
    )


def midpoints(poly: Sequence[Point]) -> list[Point]:
    """Midpoints of each polygon edge, edge i joining vertex i to vertex i+1."""
    n = len(poly)
    return [poly[i].midpoint(poly[(i + 1) % n]) for i in range(n)]


def is_convex(poly: Sequence[Point]) -> bool:
    """Check that a polygon turns consistently in one direction.

    Collinear consecutive vertices are allowed. Degenerate polygons are not
    convex.
    """
    n = len(poly)
    if n < 3:
        return False

    direction = 0
    for i in range(n):
        turn = orient(poly[i], poly[(i + 1) % n], poly[(i + 2) % n])
        if turn == 0:
            continue
        if direction == 0:
            direction = turn
        elif turn != direction:
            return False
    return direction != 0


def validate_polygon(poly: Sequence[Point], require_convex: bool = False) -> None:
    """Check the preconditions shared by the polygon predicates.

    Args:
        poly: Polygon vertices
        require_convex: Also require the polygon to be convex

    Raises:
        InvalidPolygonError: If the polygon has fewer than 3 vertices,
            non-finite coordinates, or is not convex when required
    """
    if len(poly) < 3:
        raise InvalidPolygonError(f"need at least 3 vertices, got {len(poly)}")
    for i, p in enumerate(poly):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidPolygonError(f"vertex {i} has non-finite coordinates ({p.x}, {p.y})")
    if require_convex and not is_convex(poly):
        logger.debug("Rejected non-convex polygon with %d vertices", len(poly))
        raise InvalidPolygonError("polygon is not convex")
