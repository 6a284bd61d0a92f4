"""Drag-and-highlight interaction loop over a scene.

The controller replaces the event-handler closures of a browser demo with
explicit state: a Scene and a nullable DragState. A pointer press picks the
anchor under the pointer, each pointer move applies the displacement since
the previous event to that anchor and re-evaluates all pairwise
intersections, and a pointer release ends the drag.

Input capture and rendering stay with the caller: the controller consumes
pointer positions and exposes colors and outline vertices.
"""

from itertools import combinations

import structlog

from shapelab.config import ShapelabSettings, get_default_settings
from shapelab.core.intersection import shapes_intersect
from shapelab.core.predicates import point_in_poly
from shapelab.domain import AnchorRef, Circle, DragState, Point, Scene
from shapelab.utils import InteractionLogger, InteractionStats, get_logger


class SceneController:
    """Applies pointer gestures to a scene and tracks intersections.

    Example:
        scene = default_scene()
        controller = SceneController(scene)
        if controller.begin_drag(Point(100, 50)):
            pairs = controller.drag_to(Point(240, 60))
        controller.end_drag()
    """

    def __init__(
        self,
        scene: Scene,
        settings: ShapelabSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            scene: Scene to operate on (mutated in place)
            settings: Shapelab settings (defaults if None)
            logger: Bound logger (a stdlib-backed "shapelab" logger if None,
                silent until logging is configured)
        """
        self.scene = scene
        self.settings = settings if settings is not None else get_default_settings()
        self.logger = logger if logger is not None else get_logger()
        self.interaction_logger = InteractionLogger(self.logger)
        self.drag: DragState | None = None
        self._pairs: list[tuple[int, int]] = []

    @property
    def is_dragging(self) -> bool:
        """Whether a drag gesture is active."""
        return self.drag is not None

    @property
    def intersecting_pairs(self) -> list[tuple[int, int]]:
        """Index pairs found by the most recent evaluation."""
        return list(self._pairs)

    @property
    def stats(self) -> InteractionStats:
        """Interaction statistics for this controller."""
        return self.interaction_logger.stats

    def pick_anchor(self, position: Point) -> AnchorRef | None:
        """Find the anchor under the pointer.

        When several anchors are within the pick radius, the last one in
        scene order wins (it is drawn on top).

        Args:
            position: Pointer position

        Returns:
            Reference to the picked anchor, or None
        """
        radius = self.settings.interaction.anchor_pick_radius
        picked: AnchorRef | None = None
        for shape_index, record in enumerate(self.scene.shapes):
            for anchor_index, anchor in enumerate(record.shape.anchors):
                if position.distance_to(anchor) <= radius:
                    picked = AnchorRef(shape_index, anchor_index)
        return picked

    def begin_drag(self, position: Point) -> bool:
        """Start a drag at a pointer press.

        Args:
            position: Pointer position at press time

        Returns:
            True if an anchor was grabbed
        """
        self.drag = None
        ref = self.pick_anchor(position)
        if ref is None:
            self.interaction_logger.log_pick_miss(position.x, position.y)
            return False

        self.drag = DragState(anchor=ref, last_position=position)
        self.interaction_logger.log_drag_start(
            self.scene.shapes[ref.shape_index].name, ref.anchor_index, position.x, position.y
        )
        return True

    def drag_to(self, position: Point) -> list[tuple[int, int]]:
        """Apply a pointer move to the dragged anchor.

        Without an active drag this is a no-op.

        Args:
            position: New pointer position

        Returns:
            Intersecting index pairs after the move
        """
        if self.drag is None:
            return self.intersecting_pairs

        ref = self.drag.anchor
        delta = position - self.drag.last_position
        self.drag.last_position = position

        record = self.scene.shapes[ref.shape_index]
        record.shape.drag_anchor(ref.anchor_index, delta)
        self.interaction_logger.log_drag_move(record.name, ref.anchor_index, delta.x, delta.y)

        return self.evaluate()

    def end_drag(self) -> None:
        """End the active drag, if any, at pointer release."""
        if self.drag is not None:
            ref = self.drag.anchor
            self.interaction_logger.log_drag_end(
                self.scene.shapes[ref.shape_index].name, ref.anchor_index
            )
        self.drag = None

    def evaluate(self) -> list[tuple[int, int]]:
        """Test every pair of shapes and recolor the scene.

        All shapes are reset to the scene's default color, then both shapes
        of every intersecting pair get the highlight color.

        Returns:
            Index pairs (i, j) with i < j of intersecting shapes
        """
        method = self.settings.intersection.method
        shapes = self.scene.shapes

        pairs: list[tuple[int, int]] = []
        tested = 0
        for i, j in combinations(range(len(shapes)), 2):
            tested += 1
            if shapes_intersect(shapes[i].shape, shapes[j].shape, method):
                pairs.append((i, j))

        for record in shapes:
            record.color = self.scene.default_color
        for i, j in pairs:
            shapes[i].color = self.scene.highlight_color
            shapes[j].color = self.scene.highlight_color

        self._pairs = pairs
        self.interaction_logger.log_evaluation(
            shape_count=len(shapes),
            pair_tests=tested,
            intersections=self.intersecting_names(),
        )
        return list(pairs)

    def intersecting_names(self) -> list[tuple[str, str]]:
        """Names of the shapes in each pair from the most recent evaluation."""
        shapes = self.scene.shapes
        return [(shapes[i].name, shapes[j].name) for i, j in self._pairs]

    def shapes_at(self, position: Point) -> list[str]:
        """Names of the shapes whose interior contains a point.

        Args:
            position: Point to probe

        Returns:
            Names in scene order
        """
        names = []
        for record in self.scene.shapes:
            shape = record.shape
            if isinstance(shape, Circle):
                inside = position.distance_to(shape.center) < shape.radius
            else:
                inside = point_in_poly(position, shape.polygon)
            if inside:
                names.append(record.name)
        return names

    def outlines(self) -> dict[str, list[Point]]:
        """Vertices to draw for each shape, keyed by name."""
        segments = self.settings.geometry.circle_segments
        return {record.name: record.shape.outline(segments) for record in self.scene.shapes}
