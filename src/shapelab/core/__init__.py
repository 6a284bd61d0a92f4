"""Core geometry algorithms for shapelab.

This module contains the core algorithms for:

- Predicates (orientation, segment intersection, point in polygon)
- Distances (point to line, point to segment, closest border point)
- Intersection tests (convex polygons, circles, anchored shapes)
- The drag-and-highlight scene controller

Geometry functions are:
- Stateless and pure
- Exact where they only compare signs (no epsilon tolerances)

Key functions:
- orient: Orientation of three points
- segments_intersect / segments_intersect_proper: Segment tests
- point_in_convex_poly / point_in_poly: Containment tests
- dist_to_line / dist_to_segment: Distance queries
- convex_polys_intersect: Separating Axis Theorem test
- convex_poly_circle_intersect / circles_intersect: Circle tests

Key classes:
- SceneController: Applies drag gestures and highlights intersections
"""

from shapelab.core.controller import SceneController
from shapelab.core.distance import (
    closest_point_on_segment,
    closest_poly_point,
    dist_to_line,
    dist_to_segment,
    vector_proj,
)
from shapelab.core.intersection import (
    circles_intersect,
    convex_poly_circle_intersect,
    convex_polys_intersect,
    convex_polys_intersect_edges,
    shapes_intersect,
)
from shapelab.core.predicates import (
    barycentric,
    is_convex,
    line_line_intersection,
    midpoints,
    orient,
    point_in_convex_poly,
    point_in_poly,
    polygon_area,
    segment_intersection_point,
    segments_intersect,
    segments_intersect_proper,
    validate_polygon,
)

__all__ = [
    # Controller
    "SceneController",
    # Predicates
    "barycentric",
    "is_convex",
    "line_line_intersection",
    "midpoints",
    "orient",
    "point_in_convex_poly",
    "point_in_poly",
    "polygon_area",
    "segment_intersection_point",
    "segments_intersect",
    "segments_intersect_proper",
    "validate_polygon",
    # Distances
    "closest_point_on_segment",
    "closest_poly_point",
    "dist_to_line",
    "dist_to_segment",
    "vector_proj",
    # Intersections
    "circles_intersect",
    "convex_poly_circle_intersect",
    "convex_polys_intersect",
    "convex_polys_intersect_edges",
    "shapes_intersect",
]
