"""Converters between scene file models and domain models."""

from shapelab.core.predicates import validate_polygon
from shapelab.domain import Circle, IsoscelesTriangle, Point, Rectangle, Scene, Shape
from shapelab.exceptions import InvalidPolygonError, UnknownShapeTypeError
from shapelab.io.schema import (
    CircleModel,
    Coord,
    RectangleModel,
    SceneFile,
    ShapeModel,
    TriangleModel,
)


def _point(coord: Coord) -> Point:
    return Point(coord[0], coord[1])


def _coord(point: Point) -> Coord:
    return (point.x, point.y)


# Relative to the rectangle size; saved drags accumulate rounding error
RECTANGLE_TOLERANCE = 1e-6


def _check_rectangle(name: str, rect: Rectangle) -> None:
    """Check that side midpoints describe a rectangle around the center.

    Opposite midpoints must mirror each other through the center and
    adjacent offsets must be perpendicular. A zero-length offset (a side
    dragged onto the center) is allowed; the polygon must be convex
    otherwise.

    Raises:
        InvalidPolygonError: If the anchors do not form a rectangle
    """
    offsets = [p - rect.center for p in rect.side_points]
    scale = max(1.0, *(o.length() for o in offsets))
    tolerance = RECTANGLE_TOLERANCE * scale

    for i in (0, 1):
        if (offsets[i] + offsets[i + 2]).length() > tolerance:
            raise InvalidPolygonError(
                f"rectangle '{name}': side points {i} and {i + 2} are not opposite"
            )
    if abs(offsets[0].dot(offsets[1])) > tolerance * scale:
        raise InvalidPolygonError(f"rectangle '{name}': sides are not perpendicular")

    degenerate = offsets[0].length() == 0.0 or offsets[1].length() == 0.0
    validate_polygon(rect.polygon, require_convex=not degenerate)


def model_to_shape(model: ShapeModel) -> Shape:
    """Convert a validated shape entry to a domain shape.

    Args:
        model: Shape entry from a scene file

    Returns:
        The anchored shape

    Raises:
        InvalidPolygonError: If rectangle anchors do not form a rectangle
    """
    if isinstance(model, TriangleModel):
        return IsoscelesTriangle(
            base_point=_point(model.base_point),
            opposite_vertex=_point(model.opposite_vertex),
        )
    if isinstance(model, RectangleModel):
        sides = [_point(c) for c in model.side_points]
        rect = Rectangle(
            center=_point(model.center),
            side_points=(sides[0], sides[1], sides[2], sides[3]),
        )
        _check_rectangle(model.name, rect)
        return rect
    return Circle(center=_point(model.center), control=_point(model.control))


def shape_to_model(name: str, shape: Shape) -> ShapeModel:
    """Convert a domain shape to a scene file entry.

    Args:
        name: Shape name
        shape: The anchored shape

    Returns:
        Shape entry

    Raises:
        UnknownShapeTypeError: If shape is not a supported variant
    """
    if isinstance(shape, IsoscelesTriangle):
        return TriangleModel(
            name=name,
            base_point=_coord(shape.base_point),
            opposite_vertex=_coord(shape.opposite_vertex),
        )
    if isinstance(shape, Rectangle):
        return RectangleModel(
            name=name,
            center=_coord(shape.center),
            side_points=[_coord(p) for p in shape.side_points],
        )
    if isinstance(shape, Circle):
        return CircleModel(name=name, center=_coord(shape.center), control=_coord(shape.control))
    raise UnknownShapeTypeError(type(shape).__name__)


def file_to_scene(document: SceneFile) -> Scene:
    """Build a Scene from a validated scene document.

    Raises:
        ValueError: If two shapes share a name
        InvalidPolygonError: If a rectangle entry is not a rectangle
    """
    scene = Scene(
        default_color=document.default_color,
        highlight_color=document.highlight_color,
    )
    for entry in document.shapes:
        scene.add(entry.name, model_to_shape(entry))
    return scene


def scene_to_file(scene: Scene) -> SceneFile:
    """Build a scene document from a Scene."""
    return SceneFile(
        default_color=scene.default_color,
        highlight_color=scene.highlight_color,
        shapes=[shape_to_model(record.name, record.shape) for record in scene.shapes],
    )
