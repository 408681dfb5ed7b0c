"""Path-drawing primitives and rendering modes.

A rendered shape is an ordered list of PathCommand values. Each command
mirrors one call on a drawing surface, so a recorded list can be replayed
onto any other surface.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class PathOp(Enum):
    """Primitive path operation."""

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    QUADRATIC_CURVE_TO = "quadratic_curve_to"
    BEZIER_CURVE_TO = "bezier_curve_to"
    CLOSE_PATH = "close_path"
    FILL_AND_STROKE = "fill_and_stroke"
    STROKE_ONLY = "stroke_only"


# Number of coordinates each operation carries
OP_ARITY: dict[PathOp, int] = {
    PathOp.MOVE_TO: 2,
    PathOp.LINE_TO: 2,
    PathOp.QUADRATIC_CURVE_TO: 4,
    PathOp.BEZIER_CURVE_TO: 6,
    PathOp.CLOSE_PATH: 0,
    PathOp.FILL_AND_STROKE: 0,
    PathOp.STROKE_ONLY: 0,
}

TERMINAL_OPS = frozenset({PathOp.FILL_AND_STROKE, PathOp.STROKE_ONLY})


class RenderMode(Enum):
    """How a ring's point sequence is turned into path segments.

    Modes are mutually exclusive and resolved in priority order:
    SPLINE (tension set and more than two points), then BEZIER, then STRAIGHT.
    """

    STRAIGHT = auto()
    SPLINE = auto()
    BEZIER = auto()


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single recorded surface call.

    Attributes:
        op: Operation performed
        args: Coordinates passed to the operation, in call order
    """

    op: PathOp
    args: tuple[float, ...] = field(default=())

    @property
    def end_point(self) -> tuple[float, float] | None:
        """Return the point the pen ends on, or None for non-drawing ops."""
        if len(self.args) < 2:
            return None
        return (self.args[-2], self.args[-1])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with op and args fields
        """
        return {"op": self.op.value, "args": list(self.args)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with op and args fields

        Returns:
            PathCommand instance
        """
        return cls(op=PathOp(data["op"]), args=tuple(data["args"]))
