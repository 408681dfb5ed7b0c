"""Domain models for polyshape.

This module contains the value types shared by the rendering pipeline.
All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any drawing backend

Key classes:
- Point: A 2D point
- BoundingBox: Integer bounding box of a shape
- PathCommand: One recorded drawing primitive
- RenderMode: Straight, spline or bezier rendering of a ring
"""

from polyshape.domain.commands import (
    OP_ARITY,
    TERMINAL_OPS,
    PathCommand,
    PathOp,
    RenderMode,
)
from polyshape.domain.points import (
    BoundingBox,
    Point,
    iter_points,
    point_at,
    point_count,
    validate_points,
)

__all__: list[str] = [
    # Enums
    "PathOp",
    "RenderMode",
    # Core types
    "Point",
    "BoundingBox",
    "PathCommand",
    # Constants
    "OP_ARITY",
    "TERMINAL_OPS",
    # Point sequence helpers
    "iter_points",
    "point_at",
    "point_count",
    "validate_points",
]
