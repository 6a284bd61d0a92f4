"""JSON schema for scene files.

Scene files are validated with Pydantic models. Points are stored as
[x, y] pairs and each shape carries a "type" tag selecting its variant:

    {
      "version": 1,
      "default_color": "black",
      "highlight_color": "red",
      "shapes": [
        {"type": "triangle", "name": "t1",
         "base_point": [100, 100], "opposite_vertex": [100, 50]},
        {"type": "rectangle", "name": "r1", "center": [100, 230],
         "side_points": [[150, 230], [100, 310], [50, 230], [100, 150]]},
        {"type": "circle", "name": "c1",
         "center": [100, 410], "control": [100, 360]}
      ]
    }
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

SCENE_FILE_VERSION = 1

Coord = tuple[float, float]


class _ShapeModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False, extra="forbid")

    name: str = Field(min_length=1, description="Unique shape name")


class TriangleModel(_ShapeModel):
    """Isosceles triangle entry."""

    type: Literal["triangle"] = "triangle"
    base_point: Coord
    opposite_vertex: Coord


class RectangleModel(_ShapeModel):
    """Rectangle entry."""

    type: Literal["rectangle"] = "rectangle"
    center: Coord
    side_points: list[Coord] = Field(min_length=4, max_length=4)


class CircleModel(_ShapeModel):
    """Circle entry."""

    type: Literal["circle"] = "circle"
    center: Coord
    control: Coord


ShapeModel = Annotated[
    Union[TriangleModel, RectangleModel, CircleModel],
    Field(discriminator="type"),
]


class SceneFile(BaseModel):
    """Top-level scene document."""

    model_config = ConfigDict(extra="forbid")

    version: int = Field(default=SCENE_FILE_VERSION, ge=1, le=SCENE_FILE_VERSION)
    default_color: str = Field(default="black", min_length=1)
    highlight_color: str = Field(default="red", min_length=1)
    shapes: list[ShapeModel] = Field(default_factory=list)
