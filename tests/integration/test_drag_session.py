"""Integration tests replaying full drag sessions through load, drag and save."""

import pytest

from shapelab.config import IntersectionConfig, IntersectionMethod, ShapelabSettings
from shapelab.core import SceneController
from shapelab.domain import Point, default_scene
from shapelab.io import SceneReader, SceneWriter


def replay(controller: SceneController, start: Point, end: Point, steps: int) -> None:
    """Press at start, move to end in equal steps, release."""
    assert controller.begin_drag(start)
    for i in range(1, steps + 1):
        controller.drag_to(start + (end - start).scale(i / steps))
    controller.end_drag()


@pytest.fixture
def saved_scene(tmp_path):
    return SceneWriter(tmp_path / "scene.json").save(default_scene())


@pytest.mark.parametrize("method", list(IntersectionMethod))
def test_session_round_trip(saved_scene, tmp_path, method):
    """Drag a circle into its neighbour, save, reload and re-check."""
    scene = SceneReader(saved_scene).load()
    settings = ShapelabSettings(intersection=IntersectionConfig(method=method))
    controller = SceneController(scene, settings)

    replay(controller, Point(100, 410), Point(190, 410), steps=9)
    assert controller.intersecting_names() == [("circle1", "circle2")]

    output = SceneWriter(tmp_path / "after.json").save(scene)
    reloaded = SceneReader(output).load()
    check = SceneController(reloaded, settings)
    assert check.evaluate() == [(6, 7)]
    assert reloaded.get("circle1").color == "red"


def test_rectangle_side_drag_session(saved_scene):
    """A long side drag keeps rectangle1 rectangular and its height intact."""
    scene = SceneReader(saved_scene).load()
    controller = SceneController(scene)

    # Right side midpoint of rectangle1
    replay(controller, Point(150, 230), Point(180, 300), steps=20)

    rect = scene.get("rectangle1").shape
    corners = rect.polygon
    for i in range(4):
        e1 = corners[(i + 1) % 4] - corners[i]
        e2 = corners[(i + 2) % 4] - corners[(i + 1) % 4]
        assert e1.dot(e2) == pytest.approx(0.0, abs=1e-6)
    assert rect.side_points[1].distance_to(rect.center) == pytest.approx(80.0)
    assert rect.side_points[0].is_close(Point(180, 300), tolerance=1e-6)


def test_triangle_apex_session_highlights_and_clears(saved_scene):
    """Pull triangle2's apex down into rectangle2, then back out."""
    scene = SceneReader(saved_scene).load()
    controller = SceneController(scene)

    replay(controller, Point(250, 50), Point(250, 170), steps=4)
    assert ("triangle2", "rectangle2") in controller.intersecting_names()
    assert scene.get("triangle2").color == "red"

    replay(controller, Point(250, 170), Point(250, 50), steps=4)
    assert controller.intersecting_names() == []
    assert scene.get("triangle2").color == "black"
