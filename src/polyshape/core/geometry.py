"""Geometric evaluation of rendered paths.

This module provides the operations needed to check what a recorded path
actually covers:
- Flattening recorded commands into polygons (one per subpath)
- Winding number and ray-casting containment tests
- Fill-rule evaluation of a point against a whole path

All functions are pure and stateless.
"""

from collections.abc import Iterable, Sequence

from polyshape.config import FillRule
from polyshape.core._bezier import flatten_cubic as _flatten_cubic
from polyshape.core._bezier import flatten_quadratic as _flatten_quadratic
from polyshape.domain import PathCommand, PathOp, Point


def flatten_commands(commands: Iterable[PathCommand], tolerance: float = 0.25) -> list[list[Point]]:
    """Flatten recorded path commands into polygons.

    Every move_to starts a new subpath. close_path ends the current subpath
    and leaves the pen on its first point, where the next subpath starts.
    Terminal operations are ignored.

    Args:
        commands: Recorded commands in order
        tolerance: Maximum deviation of flattened curves

    Returns:
        One list of points per subpath. Subpaths are implicitly closed
        when filled; the closing edge is not repeated in the list.
    """
    polygons: list[list[Point]] = []
    current: list[Point] = []

    def _finish() -> None:
        if current:
            polygons.append(list(current))

    for command in commands:
        op, args = command.op, command.args

        if op is PathOp.MOVE_TO:
            _finish()
            current = [Point(args[0], args[1])]
        elif op is PathOp.CLOSE_PATH:
            start = current[0] if current else None
            _finish()
            current = [start] if start is not None else []
        elif op in (PathOp.FILL_AND_STROKE, PathOp.STROKE_ONLY):
            continue
        else:
            if not current:
                # Drawing without a current point starts at the first coordinate
                current = [Point(args[0], args[1])]
            pen = current[-1]
            if op is PathOp.LINE_TO:
                current.append(Point(args[0], args[1]))
            elif op is PathOp.QUADRATIC_CURVE_TO:
                curve = _flatten_quadratic(
                    [pen, Point(args[0], args[1]), Point(args[2], args[3])], tolerance
                )
                current.extend(curve[1:])
            elif op is PathOp.BEZIER_CURVE_TO:
                curve = _flatten_cubic(
                    [
                        pen,
                        Point(args[0], args[1]),
                        Point(args[2], args[3]),
                        Point(args[4], args[5]),
                    ],
                    tolerance,
                )
                current.extend(curve[1:])

    _finish()
    return [p for p in polygons if len(p) > 1]


def _is_left(a: Point, b: Point, p: Point) -> float:
    return (b.x - a.x) * (p.y - a.y) - (p.x - a.x) * (b.y - a.y)


def winding_number(point: Point, polygon: Sequence[Point]) -> int:
    """Compute the winding number of a closed polygon around a point.

    Args:
        point: The point to test
        polygon: Polygon vertices; the last vertex connects back to the first

    Returns:
        Signed number of times the polygon winds around the point
    """
    n = len(polygon)
    if n < 2:
        return 0

    wn = 0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        if a.y <= point.y:
            if b.y > point.y and _is_left(a, b, point) > 0:
                wn += 1
        elif b.y <= point.y and _is_left(a, b, point) < 0:
            wn -= 1
    return wn


def crossing_count(point: Point, polygon: Sequence[Point]) -> int:
    """Count crossings of a rightward ray from the point with polygon edges.

    Args:
        point: The point to test
        polygon: Polygon vertices; the last vertex connects back to the first

    Returns:
        Number of edge crossings
    """
    n = len(polygon)
    if n < 2:
        return 0

    crossings = 0
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            crossings += 1

        j = i

    return crossings


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    if len(polygon) < 3:
        return False
    return crossing_count(point, polygon) % 2 == 1


def is_point_filled(
    commands: Sequence[PathCommand],
    x: float,
    y: float,
    fill_rule: FillRule = FillRule.EVEN_ODD,
    tolerance: float = 0.25,
) -> bool:
    """Evaluate whether a rendered path fills a point.

    A path that was only stroked fills nothing.

    Args:
        commands: Recorded commands of one shape
        x: X coordinate of the sample point
        y: Y coordinate of the sample point
        fill_rule: Even-odd (default) or nonzero winding rule
        tolerance: Curve flattening tolerance

    Returns:
        True if the point lies in a filled region
    """
    if not any(c.op is PathOp.FILL_AND_STROKE for c in commands):
        return False

    point = Point(x, y)
    polygons = flatten_commands(commands, tolerance)

    if fill_rule is FillRule.EVEN_ODD:
        return sum(crossing_count(point, poly) for poly in polygons) % 2 == 1
    return sum(winding_number(point, poly) for poly in polygons) != 0
