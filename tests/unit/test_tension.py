"""Unit tests for tension control-point computation.

Tests cover:
- Control points around a single point
- Open ring expansion
- Closed ring expansion with wraparound
"""

import pytest

from polyshape.core.tension import (
    closed_tension_points,
    control_points_at,
    expand_points,
    get_control_points,
    tension_points,
)

SQUARE = [0.0, 0.0, 100.0, 0.0, 100.0, 100.0, 0.0, 100.0]


class TestGetControlPoints:
    """Tests for get_control_points function."""

    def test_collinear_symmetric(self) -> None:
        """Test evenly spaced collinear points give symmetric controls."""
        assert get_control_points(0, 0, 10, 0, 20, 0, 0.5) == (5.0, 0.0, 15.0, 0.0)

    def test_asymmetric_spacing(self) -> None:
        """Test controls scale with each side's share of the distance."""
        bx, by, ax, ay = get_control_points(0, 0, 10, 0, 10, 30, 1.0)
        # d01 = 10, d12 = 30 -> fa = 0.25, fb = 0.75, chord = (10, 30)
        assert (bx, by) == pytest.approx((7.5, -7.5))
        assert (ax, ay) == pytest.approx((17.5, 22.5))

    def test_zero_tension_collapses_to_point(self) -> None:
        """Test zero tension places both controls on the point."""
        assert get_control_points(0, 0, 10, 5, 20, 0, 0.0) == (10, 5, 10, 5)

    def test_coincident_previous_point(self) -> None:
        """Test coincident previous point falls back to the current point."""
        assert get_control_points(5, 5, 5, 5, 10, 10, 0.5) == (5, 5, 5, 5)

    def test_coincident_next_point(self) -> None:
        """Test coincident next point falls back to the current point."""
        assert get_control_points(0, 0, 5, 5, 5, 5, 0.5) == (5, 5, 5, 5)

    def test_all_coincident(self) -> None:
        """Test fully degenerate input does not divide by zero."""
        assert get_control_points(1, 1, 1, 1, 1, 1, 2.0) == (1, 1, 1, 1)


class TestControlPointsAt:
    """Tests for modular neighbour lookup."""

    def test_first_point_uses_last_as_previous(self) -> None:
        """Test index 0 wraps to the last point."""
        bx, by, ax, ay = control_points_at(SQUARE, 0, 0.5)
        assert (bx, by) == pytest.approx((-25.0, 25.0))
        assert (ax, ay) == pytest.approx((25.0, -25.0))

    def test_last_point_uses_first_as_next(self) -> None:
        """Test last index wraps to point 0."""
        bx, by, ax, ay = control_points_at(SQUARE, 3, 0.5)
        assert (bx, by) == pytest.approx((25.0, 125.0))
        assert (ax, ay) == pytest.approx((-25.0, 75.0))


class TestExpandPoints:
    """Tests for open ring expansion."""

    def test_three_points(self) -> None:
        """Test one interior point yields behind, point, ahead."""
        assert expand_points([0, 0, 10, 0, 20, 0], 0.5) == [5.0, 0.0, 10, 0, 15.0, 0.0]

    def test_length(self) -> None:
        """Test six values per interior point."""
        points = [0, 0, 10, 5, 20, 0, 30, 5, 40, 0]
        assert len(expand_points(points, 0.5)) == 6 * 3

    def test_fewer_than_three_points(self) -> None:
        """Test short rings have no expansion."""
        assert expand_points([0, 0, 10, 0], 0.5) == []
        assert expand_points([], 0.5) == []

    def test_interior_points_preserved(self) -> None:
        """Test the expansion passes through every interior point."""
        points = [0, 0, 10, 5, 20, 0, 30, 5]
        expanded = expand_points(points, 0.7)
        assert expanded[2:4] == [10, 5]
        assert expanded[8:10] == [20, 0]


class TestClosedTensionPoints:
    """Tests for closed ring expansion."""

    def test_length(self) -> None:
        """Test six values per point, one cubic per segment."""
        assert len(closed_tension_points(SQUARE, 0.5)) == 6 * 4

    def test_leads_with_first_ahead_control(self) -> None:
        """Test the list starts with point 0's ahead control."""
        tp = closed_tension_points(SQUARE, 0.5)
        assert tp[0:2] == pytest.approx([25.0, -25.0])

    def test_trailing_block(self) -> None:
        """Test the last two segments end on the last point then point 0."""
        tp = closed_tension_points(SQUARE, 0.5)
        assert tp[-10:] == pytest.approx(
            [25.0, 125.0, 0.0, 100.0, -25.0, 75.0, -25.0, 25.0, 0.0, 0.0]
        )

    def test_middle_is_open_expansion(self) -> None:
        """Test the open expansion sits between the wraparound controls."""
        tp = closed_tension_points(SQUARE, 0.5)
        assert tp[2:14] == expand_points(SQUARE, 0.5)

    def test_segments_end_on_ring_points(self) -> None:
        """Test every sextuple ends on the next ring point."""
        tp = closed_tension_points(SQUARE, 0.5)
        ends = [tuple(tp[n + 4 : n + 6]) for n in range(0, len(tp), 6)]
        assert ends == [(100.0, 0.0), (100.0, 100.0), (0.0, 100.0), (0.0, 0.0)]


class TestTensionPoints:
    """Tests for tension_points dispatch."""

    def test_open_dispatch(self) -> None:
        """Test open rings use the open expansion."""
        assert tension_points(SQUARE, 0.5, closed=False) == expand_points(SQUARE, 0.5)

    def test_closed_dispatch(self) -> None:
        """Test closed rings use the closed expansion."""
        assert tension_points(SQUARE, 0.5, closed=True) == closed_tension_points(SQUARE, 0.5)

    def test_short_ring_is_empty(self) -> None:
        """Test rings under three points are never expanded."""
        assert tension_points([0, 0, 10, 0], 5.0, closed=True) == []
