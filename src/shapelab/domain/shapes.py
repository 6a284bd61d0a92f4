"""Anchored shapes: editable control points with derived geometry.

Each shape keeps a small set of user-draggable anchors and derives its
polygon (or radius) from them on every access, so the rendered geometry can
never drift out of sync with the anchors.

Supported variants:
- IsoscelesTriangle: anchors are the base midpoint and the opposite vertex
- Rectangle: anchors are the center and the four side midpoints
- Circle: anchors are the center and a radius control point

Dragging an anchor applies a displacement while preserving the variant's
defining symmetry (isosceles, right angles, radius).
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from shapelab.domain.vector import Point
from shapelab.exceptions import AnchorIndexError


class ShapeKind(str, Enum):
    """Tag identifying the shape variant."""

    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


def create_isosceles_triangle(base_point: Point, opposite_vertex: Point) -> list[Point]:
    """Build an isosceles triangle from its base midpoint and apex.

    The base corners are the base midpoint offset by the base-to-apex vector
    rotated by +90 and -90 degrees, so both are equidistant from the apex.

    Args:
        base_point: Midpoint of the triangle base
        opposite_vertex: Vertex opposite to the base (apex)

    Returns:
        The three vertices [apex, base corner, base corner]

    Examples:
        >>> create_isosceles_triangle(Point(0.0, 0.0), Point(0.0, -2.0))
        [Point(x=0.0, y=-2.0), Point(x=-2.0, y=0.0), Point(x=2.0, y=0.0)]
    """
    u = base_point - opposite_vertex
    return [
        opposite_vertex,
        base_point + Point(-u.y, u.x),
        base_point + Point(u.y, -u.x),
    ]


def create_rectangle(center: Point, side_points: Sequence[Point]) -> list[Point]:
    """Build rectangle corners from its center and side midpoints.

    Corners are the first and third side midpoints offset by plus or minus
    the vector from the center to the second side midpoint.

    Args:
        center: Rectangle center
        side_points: The four side midpoints, in order around the center

    Returns:
        The four corners

    Raises:
        ValueError: If side_points does not hold exactly four points
    """
    if len(side_points) != 4:
        raise ValueError(f"Rectangle needs 4 side points, got {len(side_points)}")

    delta = side_points[1] - center
    return [
        side_points[0] + delta,
        side_points[0] - delta,
        side_points[2] - delta,
        side_points[2] + delta,
    ]


def circle_polygon(center: Point, radius: float, segments: int = 32) -> list[Point]:
    """Approximate a circle by a regular polygon.

    Args:
        center: Circle center
        radius: Circle radius
        segments: Number of polygon vertices

    Returns:
        Polygon vertices, starting at angle 0
    """
    return [
        Point(
            center.x + radius * math.cos(2.0 * math.pi * i / segments),
            center.y + radius * math.sin(2.0 * math.pi * i / segments),
        )
        for i in range(segments)
    ]


def _check_anchor(kind: ShapeKind, index: int, count: int) -> None:
    if not 0 <= index < count:
        raise AnchorIndexError(kind.value, index, count)


@dataclass
class IsoscelesTriangle:
    """Isosceles triangle defined by its base midpoint and apex.

    Attributes:
        base_point: Midpoint of the base (anchor 0)
        opposite_vertex: Apex (anchor 1)
    """

    base_point: Point
    opposite_vertex: Point

    kind = ShapeKind.TRIANGLE

    @property
    def anchors(self) -> list[Point]:
        """Anchors in drag-index order: [base_point, opposite_vertex]."""
        return [self.base_point, self.opposite_vertex]

    @property
    def polygon(self) -> list[Point]:
        """Triangle vertices derived from the anchors."""
        return create_isosceles_triangle(self.base_point, self.opposite_vertex)

    def outline(self, segments: int = 32) -> list[Point]:  # noqa: ARG002
        """Vertices to draw for this shape."""
        return self.polygon

    def drag_anchor(self, index: int, delta: Point) -> None:
        """Move an anchor by a displacement.

        Dragging the base translates the whole triangle; dragging the apex
        reshapes it around a fixed base.

        Args:
            index: 0 for the base point, 1 for the apex
            delta: Displacement to apply

        Raises:
            AnchorIndexError: If index is not 0 or 1
        """
        _check_anchor(self.kind, index, 2)
        if index == 0:
            apex_offset = self.opposite_vertex - self.base_point
            self.base_point = self.base_point + delta
            self.opposite_vertex = self.base_point + apex_offset
        else:
            self.opposite_vertex = self.opposite_vertex + delta


@dataclass
class Rectangle:
    """Rectangle defined by its center and the midpoints of its four sides.

    Side midpoints are ordered around the center, so side_points[i] and
    side_points[(i + 2) % 4] are opposite.

    Attributes:
        center: Rectangle center (anchor 0)
        side_points: Side midpoints (anchors 1-4)
    """

    center: Point
    side_points: tuple[Point, Point, Point, Point]

    kind = ShapeKind.RECTANGLE

    def __post_init__(self) -> None:
        if len(self.side_points) != 4:
            raise ValueError(f"Rectangle needs 4 side points, got {len(self.side_points)}")
        self.side_points = tuple(self.side_points)  # type: ignore[assignment]

    @classmethod
    def from_size(cls, center: Point, half_width: float, half_height: float) -> "Rectangle":
        """Create an axis-aligned rectangle.

        Args:
            center: Rectangle center
            half_width: Distance from the center to the left/right sides
            half_height: Distance from the center to the top/bottom sides

        Returns:
            Rectangle instance
        """
        return cls(
            center=center,
            side_points=(
                center + Point(half_width, 0.0),
                center + Point(0.0, half_height),
                center + Point(-half_width, 0.0),
                center + Point(0.0, -half_height),
            ),
        )

    @property
    def anchors(self) -> list[Point]:
        """Anchors in drag-index order: [center, *side_points]."""
        return [self.center, *self.side_points]

    @property
    def polygon(self) -> list[Point]:
        """Rectangle corners derived from the anchors."""
        return create_rectangle(self.center, self.side_points)

    def outline(self, segments: int = 32) -> list[Point]:  # noqa: ARG002
        """Vertices to draw for this shape."""
        return self.polygon

    def drag_anchor(self, index: int, delta: Point) -> None:
        """Move an anchor by a displacement.

        Dragging the center translates the rectangle. Dragging a side
        midpoint resizes along that axis and turns the rectangle so the
        moved midpoint stays where the pointer put it; the perpendicular
        half-size is kept.

        Args:
            index: 0 for the center, 1-4 for the side midpoints
            delta: Displacement to apply

        Raises:
            AnchorIndexError: If index is outside 0-4
        """
        _check_anchor(self.kind, index, 5)
        if index == 0:
            self.center = self.center + delta
            self.side_points = tuple(p + delta for p in self.side_points)  # type: ignore[assignment]
            return

        side = index - 1
        center = self.center
        sides = list(self.side_points)

        moved = sides[side] + delta
        offset = moved - center
        sides[side] = moved
        sides[(side + 2) % 4] = center - offset

        adjacent = (side + 1) % 4
        if offset.length() > 0.0:
            previous = sides[adjacent] - center
            direction = offset.perpendicular().normalized()
            # Keep the adjacent midpoint on the side it was on
            if direction.dot(previous) < 0.0:
                direction = -direction
            reach = direction.scale(previous.length())
            sides[adjacent] = center + reach
            sides[(side + 3) % 4] = center - reach

        self.side_points = (sides[0], sides[1], sides[2], sides[3])


@dataclass
class Circle:
    """Circle defined by its center and a point on its boundary.

    Attributes:
        center: Circle center (anchor 0)
        control: Radius control point (anchor 1)
    """

    center: Point
    control: Point

    kind = ShapeKind.CIRCLE

    @classmethod
    def from_radius(cls, center: Point, radius: float) -> "Circle":
        """Create a circle whose control point sits above the center."""
        return cls(center=center, control=Point(center.x, center.y - radius))

    @property
    def radius(self) -> float:
        """Radius derived from the distance between center and control."""
        return self.center.distance_to(self.control)

    @property
    def anchors(self) -> list[Point]:
        """Anchors in drag-index order: [center, control]."""
        return [self.center, self.control]

    def outline(self, segments: int = 32) -> list[Point]:
        """Polygonal approximation to draw for this shape."""
        return circle_polygon(self.center, self.radius, segments)

    def drag_anchor(self, index: int, delta: Point) -> None:
        """Move an anchor by a displacement.

        Dragging the center moves the control point along with it, keeping
        the radius. Dragging the control point changes the radius only.

        Args:
            index: 0 for the center, 1 for the control point
            delta: Displacement to apply

        Raises:
            AnchorIndexError: If index is not 0 or 1
        """
        _check_anchor(self.kind, index, 2)
        if index == 0:
            self.center = self.center + delta
        self.control = self.control + delta


Shape = Union[IsoscelesTriangle, Rectangle, Circle]
