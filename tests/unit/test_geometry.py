"""Unit tests for path geometry and fill evaluation.

Tests cover:
- Flattening recorded commands into polygons
- Winding number and ray casting
- Fill-rule evaluation of shapes with holes
"""

import pytest

from polyshape.config import FillRule
from polyshape.core.geometry import (
    flatten_commands,
    is_point_filled,
    point_in_polygon,
    winding_number,
)
from polyshape.core.shape import PolyLine
from polyshape.domain import PathCommand, PathOp, Point
from polyshape.surface import RecordingSurface

SQUARE = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]


def _render(shape: PolyLine) -> list[PathCommand]:
    surface = RecordingSurface()
    shape.render(surface)
    return surface.commands


class TestFlattenCommands:
    """Tests for flatten_commands function."""

    def test_lines(self) -> None:
        """Test straight segments become polygon vertices."""
        commands = [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.LINE_TO, (10, 0)),
            PathCommand(PathOp.LINE_TO, (10, 10)),
            PathCommand(PathOp.CLOSE_PATH),
            PathCommand(PathOp.FILL_AND_STROKE),
        ]
        assert flatten_commands(commands) == [[Point(0, 0), Point(10, 0), Point(10, 10)]]

    def test_move_starts_subpath(self) -> None:
        """Test each move_to starts a new polygon."""
        commands = [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.LINE_TO, (10, 0)),
            PathCommand(PathOp.MOVE_TO, (5, 5)),
            PathCommand(PathOp.LINE_TO, (6, 6)),
        ]
        assert len(flatten_commands(commands)) == 2

    def test_lone_move_dropped(self) -> None:
        """Test subpaths with a single point are discarded."""
        commands = [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.MOVE_TO, (5, 5)),
            PathCommand(PathOp.LINE_TO, (6, 6)),
        ]
        assert flatten_commands(commands) == [[Point(5, 5), Point(6, 6)]]

    def test_cubic_keeps_end_points(self) -> None:
        """Test flattened cubics start and end on the curve ends."""
        commands = [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.BEZIER_CURVE_TO, (0, 100, 100, 100, 100, 0)),
        ]
        (polygon,) = flatten_commands(commands, tolerance=0.5)
        assert polygon[0] == Point(0, 0)
        assert polygon[-1] == Point(100, 0)
        assert len(polygon) > 4
        # Curve apex is at y = 75
        assert max(p.y for p in polygon) == pytest.approx(75, abs=0.5)

    def test_quadratic_keeps_end_points(self) -> None:
        """Test flattened quadratics start and end on the curve ends."""
        commands = [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.QUADRATIC_CURVE_TO, (50, 100, 100, 0)),
        ]
        (polygon,) = flatten_commands(commands, tolerance=0.5)
        assert polygon[0] == Point(0, 0)
        assert polygon[-1] == Point(100, 0)
        assert max(p.y for p in polygon) == pytest.approx(50, abs=0.5)


class TestContainment:
    """Tests for winding number and ray casting."""

    def test_winding_inside(self) -> None:
        """Test a point inside a simple polygon has winding 1."""
        assert abs(winding_number(Point(50, 50), SQUARE)) == 1

    def test_winding_outside(self) -> None:
        """Test a point outside has winding 0."""
        assert winding_number(Point(150, 50), SQUARE) == 0

    def test_winding_sign_follows_orientation(self) -> None:
        """Test reversing the polygon flips the winding sign."""
        reversed_square = list(reversed(SQUARE))
        assert winding_number(Point(50, 50), reversed_square) == -winding_number(
            Point(50, 50), SQUARE
        )

    def test_point_in_polygon(self) -> None:
        """Test ray casting."""
        assert point_in_polygon(Point(50, 50), SQUARE)
        assert not point_in_polygon(Point(150, 50), SQUARE)

    def test_degenerate_polygon(self) -> None:
        """Test polygons with fewer than three points contain nothing."""
        assert not point_in_polygon(Point(0, 0), SQUARE[:2])


class TestIsPointFilled:
    """Tests for fill-rule evaluation of rendered shapes."""

    EXTERIOR = [0, 0, 100, 0, 100, 100, 0, 100]
    HOLE = [25, 25, 75, 25, 75, 75, 25, 75]
    REVERSED_HOLE = [25, 25, 25, 75, 75, 75, 75, 25]

    def test_hole_excluded_even_odd(self) -> None:
        """Test a point in the hole is not filled under even-odd."""
        commands = _render(PolyLine(self.EXTERIOR, [self.HOLE], closed=True))

        assert not is_point_filled(commands, 50, 50, FillRule.EVEN_ODD)
        assert is_point_filled(commands, 10, 10, FillRule.EVEN_ODD)
        assert is_point_filled(commands, 90, 50, FillRule.EVEN_ODD)
        assert not is_point_filled(commands, 150, 50, FillRule.EVEN_ODD)

    def test_default_rule_excludes_hole(self) -> None:
        """Test the default fill rule cuts out a hole wound like the exterior."""
        commands = _render(PolyLine(self.EXTERIOR, [self.HOLE], closed=True))

        assert not is_point_filled(commands, 50, 50)
        assert is_point_filled(commands, 10, 10)

    def test_hole_excluded_nonzero_opposite_winding(self) -> None:
        """Test a hole wound against the exterior is cut out under nonzero."""
        commands = _render(PolyLine(self.EXTERIOR, [self.REVERSED_HOLE], closed=True))

        assert not is_point_filled(commands, 50, 50, FillRule.NONZERO)
        assert is_point_filled(commands, 10, 10, FillRule.NONZERO)

    def test_same_winding_hole_filled_under_nonzero(self) -> None:
        """Test a hole wound like the exterior stays filled under nonzero."""
        commands = _render(PolyLine(self.EXTERIOR, [self.HOLE], closed=True))
        assert is_point_filled(commands, 50, 50, FillRule.NONZERO)

    def test_open_shape_not_filled(self) -> None:
        """Test stroked shapes fill nothing."""
        commands = _render(PolyLine(self.EXTERIOR, [self.HOLE], closed=False))
        assert not is_point_filled(commands, 10, 10, FillRule.EVEN_ODD)

    def test_spline_blob_with_hole(self) -> None:
        """Test holes are cut out of curved closed shapes too."""
        shape = PolyLine(self.EXTERIOR, [self.HOLE], closed=True, tension=0.3)
        commands = _render(shape)

        assert not is_point_filled(commands, 50, 50, FillRule.EVEN_ODD)
        assert is_point_filled(commands, 10, 50, FillRule.EVEN_ODD)
