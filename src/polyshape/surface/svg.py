"""Surface that builds an SVG path data string."""

from polyshape.exceptions import SurfaceError


def format_number(value: float, precision: int = 3) -> str:
    """Format a coordinate compactly for SVG path data.

    Args:
        value: Coordinate to format
        precision: Maximum number of decimal places

    Returns:
        Number without trailing zeros, e.g. 12.5 or 10
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


class SvgPathSurface:
    """Collects primitives into an SVG ``d`` attribute.

    Attributes:
        precision: Decimal places for emitted coordinates
    """

    def __init__(self, precision: int = 3) -> None:
        self.precision = precision
        self._segments: list[str] = []
        self._filled: bool | None = None

    @property
    def d(self) -> str:
        """Path data string."""
        return " ".join(self._segments)

    @property
    def filled(self) -> bool:
        """Whether the shape asked to be filled (closed shapes)."""
        return bool(self._filled)

    @property
    def finished(self) -> bool:
        """Whether a terminal operation was received."""
        return self._filled is not None

    def _emit(self, command: str, *args: float) -> None:
        if self.finished:
            raise SurfaceError(f"Cannot add '{command}' after the path was finished")
        coords = " ".join(format_number(a, self.precision) for a in args)
        self._segments.append(f"{command}{coords}" if coords else command)

    def move_to(self, x: float, y: float) -> None:
        self._emit("M", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._emit("L", x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._emit("Q", cpx, cpy, x, y)

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None:
        self._emit("C", cp1x, cp1y, cp2x, cp2y, x, y)

    def close_path(self) -> None:
        self._emit("Z")

    def fill_and_stroke(self) -> None:
        if self.finished:
            raise SurfaceError("Path was already finished")
        self._filled = True

    def stroke_only(self) -> None:
        if self.finished:
            raise SurfaceError("Path was already finished")
        self._filled = False
