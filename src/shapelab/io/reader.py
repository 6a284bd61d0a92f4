"""Scene reader for loading JSON scene files.

This module provides the SceneReader class for loading scene files and
converting them into domain models.
"""

from pathlib import Path

from pydantic import ValidationError

from shapelab.domain import Scene
from shapelab.exceptions import GeometryError, SceneFormatError, SceneLoadError
from shapelab.io.converter import file_to_scene
from shapelab.io.schema import SceneFile


class SceneReader:
    """Loads scene files into Scene domain models.

    Example:
        reader = SceneReader(Path("scene.json"))
        scene = reader.load()
        for record in scene.shapes:
            print(record.name)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path

    @property
    def path(self) -> Path:
        """Path of the scene file."""
        return self._scene_path

    def load(self) -> Scene:
        """Load and validate the scene file.

        Returns:
            The loaded scene, with every shape in its default color

        Raises:
            SceneLoadError: If the file does not exist, cannot be read, or is
                not UTF-8 text
            SceneFormatError: If the content is not a valid scene document or
                a rectangle's anchors do not form a rectangle
        """
        if not self._scene_path.exists():
            raise SceneLoadError(str(self._scene_path), "file not found")

        try:
            text = self._scene_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e

        try:
            document = SceneFile.model_validate_json(text)
        except ValidationError as e:
            raise SceneFormatError(str(self._scene_path), _summarize(e)) from e

        try:
            return file_to_scene(document)
        except (ValueError, GeometryError) as e:
            raise SceneFormatError(str(self._scene_path), str(e)) from e


def _summarize(error: ValidationError) -> str:
    """Condense a validation error into a single line."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    extra = error.error_count() - 1
    suffix = f" (+{extra} more)" if extra else ""
    return f"{location}: {first['msg']}{suffix}"
