"""Shapelab - interactive 2D shape intersection toolkit.

Shapelab provides the geometry behind drag-and-highlight shape demos:
orientation predicates, point-in-polygon tests, point/segment distances,
convex polygon and circle intersection, and anchor-driven isosceles
triangles, rectangles and circles that keep their shape while dragged.

Example:
    $ shapelab demo scene.json
    $ shapelab drag scene.json --from 100,50 --to 240,60

The second command drags the apex of the first triangle onto its neighbour
and reports which shapes now intersect.
"""

__version__ = "0.1.0"
__author__ = "Shapelab contributors"

__all__ = ["__author__", "__version__"]
