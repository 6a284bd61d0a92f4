"""Scene model: named, colored shapes plus the active drag.

The scene replaces per-demo global arrays with one explicit object that is
passed to the controller, and the "selected anchor" closure state with a
nullable DragState value.
"""

from dataclasses import dataclass, field

from shapelab.domain.shapes import Circle, IsoscelesTriangle, Rectangle, Shape
from shapelab.domain.vector import Point


@dataclass
class ShapeRecord:
    """A shape placed in a scene.

    Attributes:
        name: Unique display name
        shape: The anchored shape
        color: Current color (updated by the highlight pass)
    """

    name: str
    shape: Shape
    color: str = "black"


@dataclass(frozen=True, slots=True)
class AnchorRef:
    """Reference to one anchor of one shape in a scene.

    Attributes:
        shape_index: Index of the shape record in the scene
        anchor_index: Index into the shape's anchors list
    """

    shape_index: int
    anchor_index: int


@dataclass
class DragState:
    """An in-progress drag gesture.

    Attributes:
        anchor: The anchor being dragged
        last_position: Pointer position of the previous event
    """

    anchor: AnchorRef
    last_position: Point


@dataclass
class Scene:
    """Ordered collection of shapes with their highlight colors.

    Attributes:
        shapes: Shape records, in drawing order
        default_color: Color for shapes that intersect nothing
        highlight_color: Color for shapes that intersect something
    """

    shapes: list[ShapeRecord] = field(default_factory=list)
    default_color: str = "black"
    highlight_color: str = "red"

    def add(self, name: str, shape: Shape) -> ShapeRecord:
        """Append a shape with the default color.

        Args:
            name: Unique display name
            shape: The anchored shape

        Returns:
            The new record

        Raises:
            ValueError: If the name is already used in this scene
        """
        if any(record.name == name for record in self.shapes):
            raise ValueError(f"Shape name '{name}' already used in scene")
        record = ShapeRecord(name=name, shape=shape, color=self.default_color)
        self.shapes.append(record)
        return record

    def get(self, name: str) -> ShapeRecord:
        """Look up a shape record by name.

        Raises:
            KeyError: If no shape has this name
        """
        for record in self.shapes:
            if record.name == name:
                return record
        raise KeyError(name)

    def anchor_position(self, ref: AnchorRef) -> Point:
        """Current position of a referenced anchor."""
        return self.shapes[ref.shape_index].shape.anchors[ref.anchor_index]

    def __len__(self) -> int:
        return len(self.shapes)


def default_scene() -> Scene:
    """Build the classic three-by-three demo layout.

    Three triangles, three rectangles and three circles laid out in rows,
    none of them intersecting.
    """
    scene = Scene()
    for i, x in enumerate((100.0, 250.0, 400.0), start=1):
        scene.add(
            f"triangle{i}",
            IsoscelesTriangle(base_point=Point(x, 100.0), opposite_vertex=Point(x, 50.0)),
        )
    for i, x in enumerate((100.0, 250.0, 400.0), start=1):
        scene.add(f"rectangle{i}", Rectangle.from_size(Point(x, 230.0), 50.0, 80.0))
    for i, x in enumerate((100.0, 250.0, 400.0), start=1):
        scene.add(f"circle{i}", Circle.from_radius(Point(x, 410.0), 50.0))
    return scene
