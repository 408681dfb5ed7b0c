"""Surface that records every primitive it receives."""

from collections.abc import Iterable

from polyshape.domain import TERMINAL_OPS, PathCommand, PathOp
from polyshape.exceptions import SurfaceError


class RecordingSurface:
    """Records path primitives as PathCommand values.

    The recording is closed by the first terminal operation
    (fill_and_stroke or stroke_only); drawing afterwards raises
    SurfaceError until reset() is called.

    Example:
        surface = RecordingSurface()
        shape.render(surface)
        ops = [c.op for c in surface.commands]
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []
        self._finished = False

    @property
    def commands(self) -> list[PathCommand]:
        """Recorded commands, in call order."""
        return list(self._commands)

    @property
    def ops(self) -> list[PathOp]:
        """Recorded operations without their arguments."""
        return [c.op for c in self._commands]

    @property
    def finished(self) -> bool:
        """Whether a terminal operation has been recorded."""
        return self._finished

    def reset(self) -> None:
        """Discard the recording."""
        self._commands.clear()
        self._finished = False

    def _record(self, op: PathOp, *args: float) -> None:
        if self._finished:
            raise SurfaceError(f"Cannot record '{op.value}' after the path was finished")
        self._commands.append(PathCommand(op, tuple(args)))
        if op in TERMINAL_OPS:
            self._finished = True

    def move_to(self, x: float, y: float) -> None:
        self._record(PathOp.MOVE_TO, x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record(PathOp.LINE_TO, x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._record(PathOp.QUADRATIC_CURVE_TO, cpx, cpy, x, y)

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None:
        self._record(PathOp.BEZIER_CURVE_TO, cp1x, cp1y, cp2x, cp2y, x, y)

    def close_path(self) -> None:
        self._record(PathOp.CLOSE_PATH)

    def fill_and_stroke(self) -> None:
        self._record(PathOp.FILL_AND_STROKE)

    def stroke_only(self) -> None:
        self._record(PathOp.STROKE_ONLY)


def replay(commands: Iterable[PathCommand], surface: object) -> None:
    """Replay recorded commands onto another surface.

    Args:
        commands: Commands to replay, in order
        surface: Any object implementing the DrawingSurface methods
    """
    for command in commands:
        getattr(surface, command.op.value)(*command.args)
