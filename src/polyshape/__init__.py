"""Polyshape - Render polylines, splines and polygons with holes.

Polyshape turns a shape made of one exterior ring and any number of interior
rings (holes) into an ordered list of path-drawing primitives. Rings can be
drawn as straight segments, as tension-controlled splines, or as raw cubic
bezier chains, and closed shapes with holes are emitted as a single fillable
path.

Example:
    $ polyshape shapes.json

This will create shapes.svg with one path per shape in the document.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
