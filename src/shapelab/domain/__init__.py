"""Domain models for shapelab.

This module contains the core domain models: points, anchored shapes and
scenes. Models are plain dataclasses:

- Points are immutable (frozen) and double as 2D vectors
- Shapes own their anchors and derive polygons from them on access
- Scenes hold named shapes and their highlight colors

Key classes:
- Point: A 2D point or vector
- IsoscelesTriangle, Rectangle, Circle: Anchored shape variants
- Scene, ShapeRecord: A collection of named shapes
- AnchorRef, DragState: Drag gesture bookkeeping
"""

from shapelab.domain.scene import AnchorRef, DragState, Scene, ShapeRecord, default_scene
from shapelab.domain.shapes import (
    Circle,
    IsoscelesTriangle,
    Rectangle,
    Shape,
    ShapeKind,
    circle_polygon,
    create_isosceles_triangle,
    create_rectangle,
)
from shapelab.domain.vector import Point, PointLike, as_point, as_polygon

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Core types
    "Point",
    "PointLike",
    "IsoscelesTriangle",
    "Rectangle",
    "Circle",
    "Shape",
    "Scene",
    "ShapeRecord",
    "AnchorRef",
    "DragState",
    # Builders
    "as_point",
    "as_polygon",
    "circle_polygon",
    "create_isosceles_triangle",
    "create_rectangle",
    "default_scene",
]
