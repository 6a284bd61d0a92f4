"""Intersection tests between convex polygons and circles.

Two algorithms decide whether convex polygons intersect:
- convex_polys_intersect: Separating Axis Theorem. Two convex polygons are
  disjoint iff the projections of their vertices onto some edge normal do
  not overlap. This is the reference behaviour.
- convex_polys_intersect_edges: pairwise edge tests with a containment
  fallback for nested polygons.

Both treat touching shapes as intersecting, so they agree on every input
with non-degenerate polygons.

Circles are handled exactly (no polygonal approximation).
"""

from collections.abc import Iterator, Sequence
from itertools import chain

from shapelab.config import IntersectionMethod
from shapelab.core.distance import dist_to_segment
from shapelab.core.predicates import point_in_convex_poly, segments_intersect
from shapelab.domain import Circle, Point, Shape


def _edge_normals(poly: Sequence[Point]) -> Iterator[Point]:
    """Yield a normal for every non-zero-length edge of a polygon."""
    n = len(poly)
    for i in range(n):
        edge = poly[(i + 1) % n] - poly[i]
        if edge.x == 0.0 and edge.y == 0.0:
            continue
        yield edge.perpendicular()


def _project(poly: Sequence[Point], axis: Point) -> tuple[float, float]:
    """Project polygon vertices onto an axis, returning (min, max)."""
    values = [axis.dot(p) for p in poly]
    return min(values), max(values)


def convex_polys_intersect(poly: Sequence[Point], poly2: Sequence[Point]) -> bool:
    """Return True iff two convex polygons intersect (Separating Axis Theorem).

    Both polygons are projected onto the normal of every edge of both
    polygons. If the projection intervals are disjoint on any axis, that
    axis separates the polygons. Closed intervals are compared, so polygons
    that only touch along an edge or at a vertex intersect.

    Args:
        poly: Vertices of the first convex polygon
        poly2: Vertices of the second convex polygon

    Returns:
        True if the polygons overlap or touch

    Examples:
        >>> a = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> b = [Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 3)]
        >>> convex_polys_intersect(a, b)
        True
    """
    tested = False
    for axis in chain(_edge_normals(poly), _edge_normals(poly2)):
        tested = True
        min1, max1 = _project(poly, axis)
        min2, max2 = _project(poly2, axis)
        if max1 < min2 or max2 < min1:
            return False

    if not tested:
        # Both polygons collapsed to single points
        return poly[0] == poly2[0]
    return True


def convex_polys_intersect_edges(poly: Sequence[Point], poly2: Sequence[Point]) -> bool:
    """Return True iff two convex polygons intersect (edge tests).

    Every edge of poly is tested against every edge of poly2, stopping at
    the first intersecting pair. If no edges intersect the polygons are
    either disjoint or nested; they are nested iff every vertex of one lies
    inside the other.

    Args:
        poly: Vertices of the first convex polygon
        poly2: Vertices of the second convex polygon

    Returns:
        True if the polygons overlap, touch, or one contains the other
    """
    n = len(poly)
    n2 = len(poly2)

    for i in range(n):
        p = poly[i]
        q = poly[(i + 1) % n]
        for j in range(n2):
            if segments_intersect(p, q, poly2[j], poly2[(j + 1) % n2]):
                return True

    if all(point_in_convex_poly(v, poly) for v in poly2):
        return True
    return all(point_in_convex_poly(v, poly2) for v in poly)


def convex_poly_circle_intersect(center: Point, radius: float, poly: Sequence[Point]) -> bool:
    """Return True iff a circle intersects a convex polygon.

    The circle intersects the polygon if its center is inside the polygon
    or some polygon edge comes within radius of the center.

    Args:
        center: Circle center
        radius: Circle radius
        poly: Vertices of a convex polygon

    Returns:
        True if the shapes overlap or touch
    """
    if point_in_convex_poly(center, poly):
        return True

    n = len(poly)
    return any(dist_to_segment(center, poly[i], poly[(i + 1) % n]) <= radius for i in range(n))


def circles_intersect(c1: Point, r1: float, c2: Point, r2: float) -> bool:
    """Return True iff two circles overlap or touch.

    Examples:
        >>> circles_intersect(Point(0, 0), 5.0, Point(8, 0), 2.0)
        False
        >>> circles_intersect(Point(0, 0), 5.0, Point(8, 0), 4.0)
        True
    """
    return c1.distance_to(c2) <= r1 + r2


def shapes_intersect(
    shape: Shape,
    other: Shape,
    method: IntersectionMethod = IntersectionMethod.SAT,
) -> bool:
    """Decide whether two anchored shapes intersect.

    Dispatches on the shape variants: circle/circle, circle/polygon and
    polygon/polygon. Polygon pairs use the selected algorithm.

    Args:
        shape: First shape
        other: Second shape
        method: Convex polygon intersection algorithm

    Returns:
        True if the shapes overlap or touch
    """
    if isinstance(shape, Circle) and isinstance(other, Circle):
        return circles_intersect(shape.center, shape.radius, other.center, other.radius)
    if isinstance(shape, Circle):
        return convex_poly_circle_intersect(shape.center, shape.radius, other.polygon)
    if isinstance(other, Circle):
        return convex_poly_circle_intersect(other.center, other.radius, shape.polygon)

    if method is IntersectionMethod.EDGES:
        return convex_polys_intersect_edges(shape.polygon, other.polygon)
    return convex_polys_intersect(shape.polygon, other.polygon)
