"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_commands.
Not intended for public use.
"""

import math

from polyshape.domain import Point

# Recursion guard for degenerate curves whose flatness never converges
_MAX_DEPTH = 16


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both end points
    """
    p0, p1, p2 = points

    # Curve midpoint (at t=0.5) against the chord midpoint
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y
    chord_mid_x = (p0.x + p2.x) / 2
    chord_mid_y = (p0.y + p2.y) / 2

    distance = math.hypot(curve_mid_x - chord_mid_x, curve_mid_y - chord_mid_y)

    if distance <= tolerance or depth >= _MAX_DEPTH:
        return [p0, p2]

    mid = Point(curve_mid_x, curve_mid_y)
    left = flatten_quadratic(
        [p0, Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2), mid], tolerance, depth + 1
    )
    right = flatten_quadratic(
        [mid, Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2), p2], tolerance, depth + 1
    )

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both end points
    """
    p0, p1, p2, p3 = points

    # Control points far from the chord mean the curve is not flat yet
    chord_x = p3.x - p0.x
    chord_y = p3.y - p0.y
    chord_len = math.hypot(chord_x, chord_y)
    if chord_len == 0:
        deviation = max(math.hypot(p1.x - p0.x, p1.y - p0.y), math.hypot(p2.x - p0.x, p2.y - p0.y))
    else:
        d1 = abs((p1.x - p0.x) * chord_y - (p1.y - p0.y) * chord_x) / chord_len
        d2 = abs((p2.x - p0.x) * chord_y - (p2.y - p0.y) * chord_x) / chord_len
        deviation = max(d1, d2)

    if deviation <= tolerance or depth >= _MAX_DEPTH:
        return [p0, p3]

    # First level
    q1 = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    q2 = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
    q3 = Point((p2.x + p3.x) / 2, (p2.y + p3.y) / 2)

    # Second level
    r1 = Point((q1.x + q2.x) / 2, (q1.y + q2.y) / 2)
    r2 = Point((q2.x + q3.x) / 2, (q2.y + q3.y) / 2)

    # Third level (midpoint)
    mid = Point((r1.x + r2.x) / 2, (r1.y + r2.y) / 2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
