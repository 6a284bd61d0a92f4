"""2D point and vector primitives.

A single type is used both for absolute positions and for displacements,
so callers decide which interpretation applies. Polygons are plain
sequences of points, implicitly closed (the last point connects back to
the first).

Coordinates follow the screen convention used by pointer events: x grows
to the right and y grows downwards.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable, so anchors are replaced rather than mutated.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def scale(self, factor: float) -> "Point":
        """Multiply both components by a scalar."""
        return Point(self.x * factor, self.y * factor)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance between two points."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def normalized(self) -> "Point":
        """Return the unit vector with the same direction.

        The zero vector normalizes to itself.
        """
        length = self.length()
        if length == 0.0:
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def perpendicular(self) -> "Point":
        """Rotate the vector by 90 degrees: (x, y) -> (-y, x)."""
        return Point(-self.y, self.x)

    def rotated(self, angle: float, origin: "Point | None" = None) -> "Point":
        """Rotate the point around an origin.

        Args:
            angle: Rotation angle in radians
            origin: Center of rotation (defaults to the coordinate origin)

        Returns:
            The rotated point
        """
        ox, oy = (origin.x, origin.y) if origin is not None else (0.0, 0.0)
        px = self.x - ox
        py = self.y - oy
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(px * cos_a - py * sin_a + ox, px * sin_a + py * cos_a + oy)

    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def is_close(self, other: "Point", tolerance: float = 1e-9) -> bool:
        """Check whether two points coincide within an absolute tolerance."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def is_finite(self) -> bool:
        """Check that neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair into a Point.

    Args:
        value: A Point, or any two-element sequence of numbers

    Returns:
        Point instance

    Raises:
        ValueError: If a sequence does not have exactly two elements
    """
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {len(value)} values")
    return Point(float(value[0]), float(value[1]))


def as_polygon(points: Sequence[PointLike]) -> list[Point]:
    """Coerce a sequence of points or (x, y) pairs into a list of Points."""
    return [as_point(p) for p in points]
