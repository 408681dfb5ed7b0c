"""Core rendering algorithms for polyshape.

This module contains the core algorithms for:

- Control-point computation for tension splines (open and closed rings)
- Path emission for straight, spline and bezier rings
- Composition of an exterior ring with holes into one fillable path
- Bounding box computation
- Fill evaluation of rendered paths

All functions are pure apart from the PolyLine shape, which memoizes its
tension points.

Key functions:
- get_control_points: Control points around one point
- expand_points: Tension points of an open ring
- closed_tension_points: Tension points of a closed ring
- resolve_render_mode: Pick straight, spline or bezier rendering
- compute_bounds: Integer bounding box of a point sequence
- is_point_filled: Fill-rule evaluation of a recorded path

Key classes:
- PathEmitter: Emits the primitives of one ring
- RingComposer: Stitches holes into the exterior path
- PolyLine: The shape with its properties and cache
"""

from polyshape.core.bounds import compute_bounds, effective_points
from polyshape.core.composer import RingComposer
from polyshape.core.emitter import PathEmitter, resolve_render_mode
from polyshape.core.geometry import (
    flatten_commands,
    is_point_filled,
    point_in_polygon,
    winding_number,
)
from polyshape.core.shape import PolyLine
from polyshape.core.tension import (
    closed_tension_points,
    expand_points,
    get_control_points,
    tension_points,
)

__all__ = [
    # Shape
    "PolyLine",
    # Emission
    "PathEmitter",
    "RingComposer",
    "resolve_render_mode",
    # Tension
    "closed_tension_points",
    "expand_points",
    "get_control_points",
    "tension_points",
    # Bounds
    "compute_bounds",
    "effective_points",
    # Geometry
    "flatten_commands",
    "is_point_filled",
    "point_in_polygon",
    "winding_number",
]
