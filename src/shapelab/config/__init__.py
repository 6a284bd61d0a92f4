"""Configuration management for shapelab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Numeric tolerances and polygonization settings
- InteractionConfig: Anchor picking settings
- IntersectionConfig: Polygon intersection algorithm selection
- SceneStyleConfig: Default and highlight colors
- LoggingConfig: Logging settings
- ShapelabSettings: Main application settings
"""

from shapelab.config.settings import (
    GeometryConfig,
    InteractionConfig,
    IntersectionConfig,
    IntersectionMethod,
    LoggingConfig,
    SceneStyleConfig,
    ShapelabSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "InteractionConfig",
    "IntersectionConfig",
    "IntersectionMethod",
    "LoggingConfig",
    "SceneStyleConfig",
    "ShapelabSettings",
    "get_default_settings",
]
