"""Exception hierarchy for Shapelab."""


class ShapelabError(Exception):
    """Base exception for all Shapelab errors."""

    pass


class GeometryError(ShapelabError):
    """Errors in geometric input or calculations."""

    pass


class InvalidPolygonError(GeometryError):
    """Polygon does not satisfy the preconditions of the predicates."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid polygon: {reason}")


class ShapeError(ShapelabError):
    """Errors related to anchored shapes."""

    pass


class AnchorIndexError(ShapeError):
    """Anchor index is out of range for the shape."""

    def __init__(self, shape_kind: str, index: int, anchor_count: int) -> None:
        self.shape_kind = shape_kind
        self.index = index
        self.anchor_count = anchor_count
        super().__init__(
            f"{shape_kind} has {anchor_count} anchors, got anchor index {index}"
        )


class UnknownShapeTypeError(ShapeError):
    """Shape type tag is not one of the supported variants."""

    def __init__(self, shape_type: str) -> None:
        self.shape_type = shape_type
        super().__init__(f"Unknown shape type '{shape_type}'")


class SceneError(ShapelabError):
    """Errors related to scene loading, saving or interaction."""

    pass


class SceneLoadError(SceneError):
    """Error loading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneSaveError(SceneError):
    """Error saving a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file content does not match the expected schema."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")
