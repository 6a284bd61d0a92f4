"""Scene writer for saving JSON scene files."""

from pathlib import Path

from shapelab.domain import Scene
from shapelab.exceptions import SceneSaveError
from shapelab.io.converter import scene_to_file


class SceneWriter:
    """Saves Scene domain models as JSON scene files.

    Example:
        writer = SceneWriter(Path("scene.json"))
        writer.save(scene)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the scene writer.

        Args:
            output_path: Destination path for the scene file
        """
        self._output_path = output_path

    def save(self, scene: Scene) -> Path:
        """Write the scene, creating parent directories as needed.

        Args:
            scene: Scene to save

        Returns:
            Path of the written file

        Raises:
            SceneSaveError: If the file cannot be written
        """
        document = scene_to_file(scene)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(
                document.model_dump_json(indent=2) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise SceneSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_output_path(input_path: Path, suffix: str = "-dragged") -> Path:
        """Generate an output path next to the input.

        Args:
            input_path: Original scene path
            suffix: Suffix to add before the extension

        Returns:
            Output path (e.g., scene.json -> scene-dragged.json)
        """
        return input_path.parent / f"{input_path.stem}{suffix}{input_path.suffix}"
