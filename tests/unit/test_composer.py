"""Unit tests for ring composition.

Tests cover:
- Sealing and filling closed shapes with and without holes
- Cut lines between holes and the exterior
- Stroke-only open shapes
"""

from polyshape.core.composer import RingComposer
from polyshape.core.emitter import PathEmitter
from polyshape.domain import PathCommand, PathOp
from polyshape.surface import RecordingSurface

EXTERIOR = [0, 0, 100, 0, 100, 100, 0, 100]
HOLE = [25, 25, 75, 25, 75, 75, 25, 75]


def _compose(exterior, interiors=(), closed=True, **kwargs) -> list[PathCommand]:
    surface = RecordingSurface()
    composer = RingComposer(PathEmitter(closed=closed, **kwargs), closed=closed)
    composer.compose(surface, exterior, interiors)
    return surface.commands


class TestRingComposer:
    """Tests for RingComposer class."""

    def test_closed_without_holes_uses_close_path(self) -> None:
        """Test closed shapes without holes close natively, then fill."""
        ops = [c.op for c in _compose(EXTERIOR)]
        assert ops[-2:] == [PathOp.CLOSE_PATH, PathOp.FILL_AND_STROKE]
        assert ops.count(PathOp.LINE_TO) == 3

    def test_closed_with_hole_exact_sequence(self) -> None:
        """Test the full primitive sequence for a square with a square hole."""
        commands = _compose(EXTERIOR, [HOLE])

        assert commands == [
            PathCommand(PathOp.MOVE_TO, (0, 0)),
            PathCommand(PathOp.LINE_TO, (100, 0)),
            PathCommand(PathOp.LINE_TO, (100, 100)),
            PathCommand(PathOp.LINE_TO, (0, 100)),
            PathCommand(PathOp.MOVE_TO, (25, 25)),
            PathCommand(PathOp.LINE_TO, (75, 25)),
            PathCommand(PathOp.LINE_TO, (75, 75)),
            PathCommand(PathOp.LINE_TO, (25, 75)),
            # Cut line back to the hole start, then return to the exterior
            PathCommand(PathOp.LINE_TO, (25, 25)),
            PathCommand(PathOp.MOVE_TO, (0, 100)),
            # Explicit seal instead of close_path
            PathCommand(PathOp.LINE_TO, (0, 0)),
            PathCommand(PathOp.FILL_AND_STROKE),
        ]

    def test_holes_in_order(self) -> None:
        """Test holes are drawn in insertion order, each followed by a cut line."""
        second = [40, 40, 60, 40, 60, 60]
        commands = _compose(EXTERIOR, [HOLE, second])
        moves = [c.args for c in commands if c.op is PathOp.MOVE_TO]

        assert moves == [(0, 0), (25, 25), (0, 100), (40, 40), (0, 100)]
        assert PathOp.CLOSE_PATH not in [c.op for c in commands]

    def test_open_strokes_only(self) -> None:
        """Test open shapes are stroked, never closed or filled."""
        ops = [c.op for c in _compose(EXTERIOR, closed=False)]
        assert ops[-1] is PathOp.STROKE_ONLY
        assert PathOp.CLOSE_PATH not in ops
        assert PathOp.FILL_AND_STROKE not in ops

    def test_open_with_hole_still_emits_geometry(self) -> None:
        """Test holes are emitted consistently for open shapes."""
        commands = _compose(EXTERIOR, [HOLE], closed=False)
        ops = [c.op for c in commands]

        assert ops.count(PathOp.MOVE_TO) == 3
        assert commands[-2] == PathCommand(PathOp.MOVE_TO, (0, 100))
        assert ops[-1] is PathOp.STROKE_ONLY

    def test_empty_exterior_is_noop(self) -> None:
        """Test an empty exterior emits nothing at all."""
        assert _compose([], [HOLE]) == []

    def test_empty_hole_skipped(self) -> None:
        """Test empty interior rings add no cut line."""
        commands = _compose(EXTERIOR, [[]])
        ops = [c.op for c in commands]
        assert ops[-2:] == [PathOp.CLOSE_PATH, PathOp.FILL_AND_STROKE]
        assert ops.count(PathOp.MOVE_TO) == 1

    def test_bezier_mode_applies_to_holes(self) -> None:
        """Test holes use the same rendering mode as the exterior."""
        exterior = [0, 0, 30, 0, 60, 0, 90, 0]
        hole = [10, 10, 20, 10, 30, 10, 40, 10]
        commands = _compose(exterior, [hole], bezier=True)
        ops = [c.op for c in commands]
        assert ops.count(PathOp.BEZIER_CURVE_TO) == 2

    def test_spline_holes_use_their_own_tension_points(self) -> None:
        """Test each hole's spline passes through its own points."""
        commands = _compose(EXTERIOR, [HOLE], tension=0.5)
        hole_start = commands.index(PathCommand(PathOp.MOVE_TO, (25, 25)))
        hole_ends = [c.end_point for c in commands[hole_start + 1 : hole_start + 5]]
        assert hole_ends == [(75, 25), (75, 75), (25, 75), (25, 25)]

    def test_tension_provider_used_for_rings(self) -> None:
        """Test a tension provider supplies precomputed points."""
        calls: list[int] = []

        def provider(ring):
            calls.append(len(ring))
            return None

        surface = RecordingSurface()
        composer = RingComposer(PathEmitter(tension=0.5, closed=True), closed=True)
        composer.compose(surface, EXTERIOR, [HOLE], provider)
        assert calls == [8, 8]

    def test_returns_primitive_count(self) -> None:
        """Test the returned count includes the terminal operation."""
        surface = RecordingSurface()
        composer = RingComposer(PathEmitter(closed=True), closed=True)
        count = composer.compose(surface, EXTERIOR, [HOLE])
        assert count == len(surface.commands)
