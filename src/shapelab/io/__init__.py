"""Scene file I/O layer for shapelab.

This module handles reading and writing JSON scene files. Pydantic models
validate the file content and converters map it to the domain models.

Key classes:
- SceneReader: Load and validate scene files
- SceneWriter: Save scenes
"""

from shapelab.io.reader import SceneReader
from shapelab.io.writer import SceneWriter

__all__ = [
    "SceneReader",
    "SceneWriter",
]
