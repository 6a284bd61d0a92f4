"""Unit tests for the scene file I/O layer.

Tests for SceneReader, SceneWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from shapelab.domain import Circle, IsoscelesTriangle, Point, Rectangle, Scene, default_scene
from shapelab.exceptions import (
    InvalidPolygonError,
    SceneFormatError,
    SceneLoadError,
    SceneSaveError,
    UnknownShapeTypeError,
)
from shapelab.io import SceneReader, SceneWriter
from shapelab.io.converter import file_to_scene, model_to_shape, scene_to_file, shape_to_model
from shapelab.io.schema import RectangleModel, SceneFile


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def triangle_entry():
    return {
        "type": "triangle",
        "name": "t1",
        "base_point": [100, 100],
        "opposite_vertex": [100, 50],
    }


class TestSceneReader:
    """Tests for SceneReader class."""

    def test_init(self):
        path = Path("scene.json")
        assert SceneReader(path).path == path

    def test_load_nonexistent_file(self, tmp_path):
        reader = SceneReader(tmp_path / "missing.json")
        with pytest.raises(SceneLoadError, match="file not found"):
            reader.load()

    def test_load_valid(self, tmp_path, triangle_entry):
        path = write_json(tmp_path / "scene.json", {"shapes": [triangle_entry]})
        scene = SceneReader(path).load()
        assert len(scene) == 1
        record = scene.get("t1")
        assert isinstance(record.shape, IsoscelesTriangle)
        assert record.shape.opposite_vertex == Point(100, 50)
        assert record.color == "black"

    def test_load_colors(self, tmp_path, triangle_entry):
        path = write_json(
            tmp_path / "scene.json",
            {"default_color": "gray", "highlight_color": "blue", "shapes": [triangle_entry]},
        )
        scene = SceneReader(path).load()
        assert scene.highlight_color == "blue"
        assert scene.get("t1").color == "gray"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SceneFormatError):
            SceneReader(path).load()

    def test_unknown_shape_type(self, tmp_path):
        path = write_json(
            tmp_path / "scene.json",
            {"shapes": [{"type": "hexagon", "name": "h", "center": [0, 0]}]},
        )
        with pytest.raises(SceneFormatError, match="shapes.0"):
            SceneReader(path).load()

    def test_rectangle_needs_four_sides(self, tmp_path):
        path = write_json(
            tmp_path / "scene.json",
            {
                "shapes": [
                    {
                        "type": "rectangle",
                        "name": "r",
                        "center": [0, 0],
                        "side_points": [[1, 0], [0, 1], [-1, 0]],
                    }
                ]
            },
        )
        with pytest.raises(SceneFormatError, match="side_points"):
            SceneReader(path).load()

    def test_non_numeric_coordinate(self, tmp_path, triangle_entry):
        triangle_entry["base_point"] = ["a", 0]
        path = write_json(tmp_path / "scene.json", {"shapes": [triangle_entry]})
        with pytest.raises(SceneFormatError, match="base_point"):
            SceneReader(path).load()

    def test_unknown_field(self, tmp_path, triangle_entry):
        triangle_entry["radius"] = 4
        path = write_json(tmp_path / "scene.json", {"shapes": [triangle_entry]})
        with pytest.raises(SceneFormatError):
            SceneReader(path).load()

    def test_unsupported_version(self, tmp_path):
        path = write_json(tmp_path / "scene.json", {"version": 2, "shapes": []})
        with pytest.raises(SceneFormatError, match="version"):
            SceneReader(path).load()

    def test_duplicate_names(self, tmp_path, triangle_entry):
        path = write_json(tmp_path / "scene.json", {"shapes": [triangle_entry, triangle_entry]})
        with pytest.raises(SceneFormatError, match="already used"):
            SceneReader(path).load()

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_bytes(b"\xff\xfe{\"shapes\": []}")
        with pytest.raises(SceneLoadError, match="utf-8"):
            SceneReader(path).load()

    def test_error_mentions_path(self, tmp_path):
        path = write_json(tmp_path / "scene.json", {"shapes": "nope"})
        with pytest.raises(SceneFormatError) as exc_info:
            SceneReader(path).load()
        assert exc_info.value.path == str(path)


class TestSceneWriter:
    """Tests for SceneWriter class."""

    def test_save_and_reload(self, tmp_path):
        scene = default_scene()
        path = SceneWriter(tmp_path / "out" / "scene.json").save(scene)
        assert path.exists()

        loaded = SceneReader(path).load()
        assert [r.name for r in loaded.shapes] == [r.name for r in scene.shapes]
        for original, reloaded in zip(scene.shapes, loaded.shapes):
            assert reloaded.shape.kind == original.shape.kind
            assert reloaded.shape.anchors == original.shape.anchors

    def test_saved_content(self, tmp_path):
        scene = Scene()
        scene.add("c", Circle.from_radius(Point(10, 20), 5))
        path = SceneWriter(tmp_path / "scene.json").save(scene)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["shapes"] == [
            {"name": "c", "type": "circle", "center": [10.0, 20.0], "control": [10.0, 15.0]}
        ]

    def test_save_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(SceneSaveError):
            SceneWriter(blocker / "scene.json").save(default_scene())

    def test_get_output_path(self):
        output = SceneWriter.get_output_path(Path("/scenes/demo.json"))
        assert output == Path("/scenes/demo-dragged.json")

    def test_get_output_path_custom_suffix(self):
        output = SceneWriter.get_output_path(Path("demo.json"), suffix="-v2")
        assert output == Path("demo-v2.json")


class TestConverter:
    """Tests for model/domain converters."""

    def test_rectangle_round_trip(self):
        scene = Scene()
        scene.add("r", Rectangle.from_size(Point(5, 5), 3, 2))
        document = scene_to_file(scene)
        rebuilt = file_to_scene(SceneFile.model_validate_json(document.model_dump_json()))
        assert rebuilt.get("r").shape.polygon == scene.get("r").shape.polygon

    def test_unknown_shape(self):
        with pytest.raises(UnknownShapeTypeError, match="str"):
            shape_to_model("x", "not a shape")  # type: ignore[arg-type]


def rectangle_file(tmp_path: Path, center, side_points) -> Path:
    return write_json(
        tmp_path / "scene.json",
        {
            "shapes": [
                {"type": "rectangle", "name": "r", "center": center, "side_points": side_points}
            ]
        },
    )


class TestRectangleEntries:
    """Rectangle entries must describe an actual rectangle."""

    def test_sides_not_opposite(self, tmp_path):
        path = rectangle_file(tmp_path, [0, 0], [[1, 0], [0, 1], [5, 5], [0, -1]])
        with pytest.raises(SceneFormatError, match="not opposite"):
            SceneReader(path).load()

    def test_sides_not_perpendicular(self, tmp_path):
        path = rectangle_file(tmp_path, [0, 0], [[2, 0], [1, 1], [-2, 0], [-1, -1]])
        with pytest.raises(SceneFormatError, match="not perpendicular"):
            SceneReader(path).load()

    def test_rotated_rectangle(self, tmp_path):
        h = 0.7071067811865476
        path = rectangle_file(tmp_path, [0, 0], [[2, 2], [-h, h], [-2, -2], [h, -h]])
        rect = SceneReader(path).load().get("r").shape
        assert rect.side_points[0] == Point(2, 2)

    def test_side_collapsed_onto_center(self, tmp_path):
        path = rectangle_file(tmp_path, [0, 0], [[0, 0], [0, 1], [0, 0], [0, -1]])
        rect = SceneReader(path).load().get("r").shape
        assert rect.side_points[1] == Point(0, 1)

    def test_dragged_rectangle_reloads(self, tmp_path):
        scene = Scene()
        scene.add("r", Rectangle.from_size(Point(100, 230), 50, 80))
        rect = scene.get("r").shape
        for delta in [Point(13.7, -21.3), Point(-4.1, 9.9), Point(30.3, 0.7)]:
            rect.drag_anchor(2, delta)

        path = SceneWriter(tmp_path / "scene.json").save(scene)
        reloaded = SceneReader(path).load().get("r").shape
        assert reloaded.side_points == rect.side_points

    def test_model_to_shape_rejects_skewed_rectangle(self):
        model = RectangleModel(
            name="r", center=(0, 0), side_points=[(2, 0), (1, 1), (-2, 0), (-1, -1)]
        )
        with pytest.raises(InvalidPolygonError, match="rectangle 'r'"):
            model_to_shape(model)
