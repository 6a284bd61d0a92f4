"""Configuration settings for Shapelab."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class IntersectionMethod(str, Enum):
    """Algorithm used to decide whether two convex polygons intersect."""

    SAT = "sat"
    EDGES = "edges"


class GeometryConfig(BaseModel):
    """Configuration for geometry operations."""

    circle_segments: int = Field(
        default=32,
        ge=3,
        le=1024,
        description="Number of segments used when a circle is approximated by a polygon",
    )


class InteractionConfig(BaseModel):
    """Configuration for pointer interaction with anchors."""

    anchor_pick_radius: float = Field(
        default=5.0,
        gt=0.0,
        le=100.0,
        description="Maximum pointer distance for grabbing an anchor",
    )


class IntersectionConfig(BaseModel):
    """Configuration for intersection tests."""

    method: IntersectionMethod = Field(
        default=IntersectionMethod.SAT,
        description="Convex polygon intersection algorithm (sat|edges)",
    )


class SceneStyleConfig(BaseModel):
    """Colors assigned by the intersection highlight pass."""

    default_color: str = Field(
        default="black",
        min_length=1,
        description="Color of shapes that intersect nothing",
    )
    highlight_color: str = Field(
        default="red",
        min_length=1,
        description="Color of shapes that intersect at least one other shape",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapelabSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    interaction: InteractionConfig = Field(default_factory=InteractionConfig)
    intersection: IntersectionConfig = Field(default_factory=IntersectionConfig)
    style: SceneStyleConfig = Field(default_factory=SceneStyleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapelabSettings:
    """Get default application settings."""
    return ShapelabSettings()
