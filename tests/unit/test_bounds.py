"""Unit tests for bounding box computation."""

import pytest

from polyshape.core.bounds import compute_bounds, effective_points
from polyshape.core.tension import closed_tension_points, expand_points
from polyshape.domain import BoundingBox

SQUARE = [0, 0, 100, 0, 100, 100, 0, 100]


class TestComputeBounds:
    """Tests for compute_bounds function."""

    def test_square(self) -> None:
        """Test bounds of the unit example square."""
        assert compute_bounds(SQUARE) == BoundingBox(x=0, y=0, width=100, height=100)

    def test_offset_points(self) -> None:
        """Test extremes are tracked independently per axis."""
        assert compute_bounds([10, 20, 100, 30, 50, 150]) == BoundingBox(10, 20, 90, 130)

    def test_negative_coordinates(self) -> None:
        """Test negative coordinates."""
        assert compute_bounds([-10, -5, 10, 5]) == BoundingBox(-10, -5, 20, 10)

    def test_rounding_applied_at_end(self) -> None:
        """Test the extent is rounded, not the difference of rounded extremes."""
        # Per-point rounding would give round(1.4) - round(0.5) = 0
        assert compute_bounds([0.5, 0, 1.4, 0]) == BoundingBox(x=1, y=0, width=1, height=0)

    def test_halves_round_up(self) -> None:
        """Test halves round toward positive infinity."""
        assert compute_bounds([2.5, -2.5]).x == 3
        assert compute_bounds([2.5, -2.5]).y == -2

    def test_single_point(self) -> None:
        """Test a single point has zero extent."""
        assert compute_bounds([7, 8]) == BoundingBox(7, 8, 0, 0)

    def test_empty(self) -> None:
        """Test empty sequence gives an empty box."""
        assert compute_bounds([]) == BoundingBox(0, 0, 0, 0)

    @pytest.mark.parametrize("shift", [0, 1, 2, 3])
    def test_rotation_invariant(self, shift: int) -> None:
        """Test the box does not depend on which point comes first."""
        pentagon = [0, 10, 9.5, 3.1, 5.9, -8.1, -5.9, -8.1, -9.5, 3.1]
        rotated = pentagon[2 * shift :] + pentagon[: 2 * shift]
        assert compute_bounds(rotated) == compute_bounds(pentagon)


class TestEffectivePoints:
    """Tests for effective_points function."""

    def test_no_tension_uses_exterior(self) -> None:
        """Test raw exterior is used without tension."""
        assert effective_points(SQUARE, 0, closed=True) == SQUARE

    def test_short_ring_uses_exterior(self) -> None:
        """Test two-point rings are never expanded."""
        assert effective_points([0, 0, 10, 0], 5, closed=False) == [0, 0, 10, 0]

    def test_closed_uses_tension_points(self) -> None:
        """Test closed splines are bounded by their control points."""
        assert effective_points(SQUARE, 0.5, closed=True) == closed_tension_points(SQUARE, 0.5)

    def test_open_adds_end_points(self) -> None:
        """Test open splines keep their end points in the set."""
        result = effective_points(SQUARE, 0.5, closed=False)
        assert result[:2] == [0, 0]
        assert result[-2:] == [0, 100]
        assert result[2:-2] == expand_points(SQUARE, 0.5)

    def test_precomputed_expansion(self) -> None:
        """Test a supplied expansion is used as-is."""
        assert effective_points(SQUARE, 0.5, closed=True, expanded=[1, 2]) == [1, 2]

    def test_closed_spline_bounds(self) -> None:
        """Test bounds grow to include the spline's control points."""
        points = effective_points(SQUARE, 0.5, closed=True)
        assert compute_bounds(points) == BoundingBox(x=-25, y=-25, width=150, height=150)
