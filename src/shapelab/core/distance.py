"""Distance queries between points, lines, segments and polygon borders.

Distances are computed by orthogonal decomposition: the vector from the
line's anchor point to the query point is split into its projection on the
line direction and the rejection, whose length is the distance.

Zero-length directions have deterministic fallbacks (distance to the anchor
point) instead of dividing by zero.
"""

from collections.abc import Sequence

from shapelab.domain import Point


def vector_proj(u: Point, v: Point) -> Point:
    """Project vector u onto vector v.

    Args:
        u: Vector to project
        v: Direction to project onto

    Returns:
        The projection of u on v; the zero vector if v is zero
    """
    unit = v.normalized()
    return unit.scale(unit.dot(u))


def dist_to_line(q: Point, p: Point, v: Point) -> float:
    """Distance from point q to the infinite line through p with direction v.

    Args:
        q: Query point
        p: Point on the line
        v: Line direction (need not be unit length)

    Returns:
        Perpendicular distance; distance from q to p if v is the zero vector

    Examples:
        >>> dist_to_line(Point(1.0, 3.0), Point(0.0, 0.0), Point(2.0, 0.0))
        3.0
    """
    pq = q - p
    return (pq - vector_proj(pq, v)).length()


def dist_to_segment(p: Point, a: Point, b: Point) -> float:
    """Distance from point p to the closest point of segment a-b.

    The projection of p on the supporting line is measured along the unit
    direction a->b. Before a the closest point is a, past b it is b, and in
    between the distance is the distance to the line.

    Args:
        p: Query point
        a: Segment start
        b: Segment end

    Returns:
        Shortest distance; distance to a for a zero-length segment

    Examples:
        >>> dist_to_segment(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
        >>> dist_to_segment(Point(5.0, 0.0), Point(0.0, 0.0), Point(2.0, 0.0))
        3.0
    """
    length = a.distance_to(b)
    if length == 0.0:
        return p.distance_to(a)

    unit = (b - a).scale(1.0 / length)
    ap = p - a
    t = unit.dot(ap)
    if t < 0.0:
        return p.distance_to(a)
    if t > length:
        return p.distance_to(b)
    return (ap - unit.scale(t)).length()


def closest_point_on_segment(p: Point, a: Point, b: Point) -> Point:
    """Point of segment a-b closest to p.

    Args:
        p: Query point
        a: Segment start
        b: Segment end

    Returns:
        The closest point; a for a zero-length segment
    """
    ab = b - a
    length_sq = ab.dot(ab)
    if length_sq == 0.0:
        return a

    t = max(0.0, min(1.0, (p - a).dot(ab) / length_sq))
    return a + ab.scale(t)


def closest_poly_point(p: Point, poly: Sequence[Point]) -> Point:
    """Point of the polygon border closest to p.

    Args:
        p: Query point
        poly: Polygon vertices (closed loop)

    Returns:
        The closest border point

    Raises:
        ValueError: If poly is empty
    """
    n = len(poly)
    if n == 0:
        raise ValueError("Polygon must have at least 1 point")

    best = poly[0]
    best_distance = p.distance_to(best)
    for i in range(n):
        candidate = closest_point_on_segment(p, poly[i], poly[(i + 1) % n])
        distance = p.distance_to(candidate)
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best
