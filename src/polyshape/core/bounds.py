"""Bounding box computation over a shape's effective point set."""

import math
from collections.abc import Sequence

from polyshape.core.tension import tension_points
from polyshape.domain import BoundingBox, point_count


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def effective_points(
    exterior: Sequence[float],
    tension: float,
    closed: bool,
    expanded: Sequence[float] | None = None,
) -> list[float]:
    """Return the points that bound the rendered outline.

    With tension, the control points of the spline are used. An open spline
    does not carry its end points in the expansion, so they are added back.
    Without tension (or with too few points for a spline) the raw exterior
    is used. Interior rings never contribute.

    Args:
        exterior: Flat point sequence of the outline
        tension: Smoothing factor
        closed: Whether the ring wraps around
        expanded: Precomputed tension points, if available

    Returns:
        Flat point sequence to scan
    """
    if tension == 0 or point_count(exterior) < 3:
        return list(exterior)

    if expanded is None:
        expanded = tension_points(exterior, tension, closed)

    if closed:
        return list(expanded)
    return [exterior[0], exterior[1], *expanded, exterior[-2], exterior[-1]]


def compute_bounds(points: Sequence[float]) -> BoundingBox:
    """Compute the integer bounding box of a flat point sequence.

    Extremes are tracked in full precision and rounded once at the end
    (halves round up).

    Args:
        points: Flat point sequence

    Returns:
        BoundingBox; all zeros for an empty sequence

    Examples:
        >>> compute_bounds([0, 0, 100, 0, 100, 100, 0, 100])
        BoundingBox(x=0, y=0, width=100, height=100)
    """
    if point_count(points) == 0:
        return BoundingBox(0, 0, 0, 0)

    min_x = max_x = points[0]
    min_y = max_y = points[1]

    for i in range(2, len(points) - 1, 2):
        x, y = points[i], points[i + 1]
        min_x = min(min_x, x)
        max_x = max(max_x, x)
        min_y = min(min_y, y)
        max_y = max(max_y, y)

    return BoundingBox(
        x=_round_half_up(min_x),
        y=_round_half_up(min_y),
        width=_round_half_up(max_x - min_x),
        height=_round_half_up(max_y - min_y),
    )
