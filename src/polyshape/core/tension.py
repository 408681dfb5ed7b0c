"""Control-point computation for tension splines.

A tension spline passes through every point of a ring. Each interior point
gets a pair of bezier control points, one behind and one ahead of it, placed
along the line joining its two neighbours. The resulting flat list is
consumed by the path emitter six values at a time.

All functions are pure and operate on flat point sequences.
"""

import math
from collections.abc import Sequence

from polyshape.domain import point_at, point_count

ControlPoints = tuple[float, float, float, float]


def get_control_points(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    tension: float,
) -> ControlPoints:
    """Compute the two control points around (x1, y1).

    The tangent at the middle point is parallel to the chord from the
    previous to the next point. Its length on each side is scaled by the
    tension and by that side's share of the total neighbour distance, so a
    short segment next to a long one is not over-rounded.

    Args:
        x0: X of the previous point
        y0: Y of the previous point
        x1: X of the current point
        y1: Y of the current point
        x2: X of the next point
        y2: Y of the next point
        tension: Smoothing factor

    Returns:
        (behind_x, behind_y, ahead_x, ahead_y). When the current point
        coincides with a neighbour, both control points are the current point.

    Examples:
        >>> get_control_points(0, 0, 10, 0, 20, 0, 0.5)
        (5.0, 0.0, 15.0, 0.0)
    """
    d01 = math.hypot(x1 - x0, y1 - y0)
    d12 = math.hypot(x2 - x1, y2 - y1)

    if d01 == 0 or d12 == 0:
        return (x1, y1, x1, y1)

    fa = tension * d01 / (d01 + d12)
    fb = tension * d12 / (d01 + d12)

    return (
        x1 - fa * (x2 - x0),
        y1 - fa * (y2 - y0),
        x1 + fb * (x2 - x0),
        y1 + fb * (y2 - y0),
    )


def control_points_at(points: Sequence[float], index: int, tension: float) -> ControlPoints:
    """Compute control points for the point at a pair index.

    Neighbours are looked up modulo the ring length, so index 0 uses the
    last point as its predecessor and the last index uses point 0 as its
    successor.

    Args:
        points: Flat point sequence with at least one point
        index: Pair index of the current point
        tension: Smoothing factor

    Returns:
        Control points as returned by get_control_points
    """
    prev = point_at(points, index - 1)
    cur = point_at(points, index)
    nxt = point_at(points, index + 1)
    return get_control_points(prev.x, prev.y, cur.x, cur.y, nxt.x, nxt.y, tension)


def expand_points(points: Sequence[float], tension: float) -> list[float]:
    """Expand an open ring into tension points.

    Every point except the first and last contributes six values:
    its behind control point, the point itself, and its ahead control point.

    Args:
        points: Flat point sequence
        tension: Smoothing factor

    Returns:
        Flat list of 6 * (N - 2) values, empty for fewer than three points
    """
    expanded: list[float] = []
    for i in range(1, point_count(points) - 1):
        bx, by, ax, ay = control_points_at(points, i, tension)
        expanded.extend((bx, by, points[2 * i], points[2 * i + 1], ax, ay))
    return expanded


def closed_tension_points(points: Sequence[float], tension: float) -> list[float]:
    """Expand a closed ring into tension points including the wraparound.

    The open expansion is bracketed by the control points of the first and
    last points so that it reads as N consecutive cubic segments:
    the ahead control of point 0 leads, and the trailing block holds the
    segment into the last point followed by the closing segment back to
    point 0.

    Args:
        points: Flat point sequence with at least two points
        tension: Smoothing factor

    Returns:
        Flat list of 6 * N values
    """
    count = point_count(points)
    first = control_points_at(points, 0, tension)
    last = control_points_at(points, count - 1, tension)

    return [
        first[2],
        first[3],
        *expand_points(points, tension),
        last[0],
        last[1],
        points[-2],
        points[-1],
        last[2],
        last[3],
        first[0],
        first[1],
        points[0],
        points[1],
    ]


def tension_points(points: Sequence[float], tension: float, closed: bool) -> list[float]:
    """Expand a ring for spline rendering.

    Args:
        points: Flat point sequence
        tension: Smoothing factor
        closed: Whether the ring wraps around

    Returns:
        Tension points for the open or closed case. Empty when the ring has
        fewer than three points, since such rings are drawn straight.
    """
    if point_count(points) < 3:
        return []
    if closed:
        return closed_tension_points(points, tension)
    return expand_points(points, tension)
