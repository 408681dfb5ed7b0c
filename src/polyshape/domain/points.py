"""Core geometric types for point sequence representation.

This module defines the fundamental geometric types used throughout polyshape:
- Point: A 2D point
- BoundingBox: Integer axis-aligned box of a shape
- Helpers for flat point sequences ([x0, y0, x1, y1, ...])
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any

from polyshape.exceptions import PointSequenceError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in user units
        y: Y coordinate in user units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box with integer coordinates.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """

    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, width and height fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


def validate_points(points: Sequence[float], name: str = "points") -> list[float]:
    """Validate a flat point sequence and return it as a new list of floats.

    Args:
        points: Flat sequence alternating x and y coordinates
        name: Name used in error messages

    Returns:
        Copy of the sequence with every coordinate converted to float

    Raises:
        PointSequenceError: If the sequence has odd length or non-numeric values
    """
    if isinstance(points, (str, bytes)):
        raise PointSequenceError(name, "expected a sequence of numbers")

    values = list(points)
    if len(values) % 2 != 0:
        raise PointSequenceError(name, f"odd number of coordinates ({len(values)})")

    for value in values:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise PointSequenceError(name, f"non-numeric coordinate {value!r}")

    return [float(v) for v in values]


def point_count(points: Sequence[float]) -> int:
    """Return the number of (x, y) pairs in a flat sequence."""
    return len(points) // 2


def iter_points(points: Sequence[float]) -> Iterator[Point]:
    """Iterate a flat sequence as Point objects."""
    for i in range(0, len(points) - 1, 2):
        yield Point(points[i], points[i + 1])


def point_at(points: Sequence[float], index: int) -> Point:
    """Return the point at a pair index, wrapping around the ring.

    Args:
        points: Flat point sequence (must not be empty)
        index: Pair index; taken modulo the number of points

    Returns:
        Point at the wrapped index
    """
    i = (index % point_count(points)) * 2
    return Point(points[i], points[i + 1])
