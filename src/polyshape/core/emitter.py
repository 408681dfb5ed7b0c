"""Path emission for a single ring.

Turns one flat point sequence into surface primitives. The rendering mode
is resolved once per call from the tension and bezier flags, and each mode
has its own emission routine.
"""

import logging
from collections.abc import Sequence

from polyshape.core.tension import tension_points as expand_tension_points
from polyshape.domain import RenderMode, point_count
from polyshape.surface import DrawingSurface

logger = logging.getLogger(__name__)


def resolve_render_mode(points: Sequence[float], tension: float, bezier: bool) -> RenderMode:
    """Resolve how a ring is drawn.

    Tension wins over bezier, and bezier wins over straight segments.
    Tension needs at least three points; shorter rings fall through.

    Args:
        points: Flat point sequence
        tension: Smoothing factor
        bezier: Whether to read the points as a cubic bezier chain

    Returns:
        The rendering mode for this ring
    """
    if tension != 0 and point_count(points) > 2:
        return RenderMode.SPLINE
    if bezier:
        return RenderMode.BEZIER
    return RenderMode.STRAIGHT


class PathEmitter:
    """Emits the primitives for one ring.

    Example:
        emitter = PathEmitter(tension=0.5, closed=True)
        emitter.emit(surface, [0, 0, 100, 0, 100, 100])

    Attributes:
        tension: Smoothing factor
        closed: Whether rings wrap around
        bezier: Whether rings are cubic bezier chains when tension is 0
    """

    def __init__(self, tension: float = 0.0, closed: bool = False, bezier: bool = False) -> None:
        self.tension = tension
        self.closed = closed
        self.bezier = bezier

    def mode_for(self, points: Sequence[float]) -> RenderMode:
        """Return the rendering mode this emitter uses for a ring."""
        return resolve_render_mode(points, self.tension, self.bezier)

    def emit(
        self,
        surface: DrawingSurface,
        points: Sequence[float],
        tension_points: Sequence[float] | None = None,
    ) -> int:
        """Emit primitives for a ring.

        Args:
            surface: Target surface
            points: Flat point sequence; empty emits nothing
            tension_points: Precomputed tension points for this ring. Computed
                on demand when omitted and the ring is drawn as a spline.

        Returns:
            Number of primitives emitted
        """
        if not points:
            return 0

        mode = self.mode_for(points)
        logger.debug("Emitting %s ring (%d points)", mode.name, point_count(points))

        surface.move_to(points[0], points[1])

        if mode is RenderMode.SPLINE:
            if tension_points is None:
                tension_points = expand_tension_points(points, self.tension, self.closed)
            return 1 + self._emit_spline(surface, points, tension_points)
        if mode is RenderMode.BEZIER:
            return 1 + self._emit_bezier(surface, points)
        return 1 + self._emit_straight(surface, points)

    def _emit_spline(
        self,
        surface: DrawingSurface,
        points: Sequence[float],
        tp: Sequence[float],
    ) -> int:
        length = len(tp)
        emitted = 0

        if self.closed:
            n = 0
        else:
            # Open ends are quadratics from the end point to its single neighbour
            surface.quadratic_curve_to(tp[0], tp[1], tp[2], tp[3])
            emitted += 1
            n = 4

        while n < length - 2:
            surface.bezier_curve_to(*tp[n : n + 6])
            emitted += 1
            n += 6

        if not self.closed:
            surface.quadratic_curve_to(tp[length - 2], tp[length - 1], points[-2], points[-1])
            emitted += 1

        return emitted

    def _emit_bezier(self, surface: DrawingSurface, points: Sequence[float]) -> int:
        emitted = 0
        # Trailing coordinates that do not complete a segment are dropped
        for n in range(2, len(points) - 5, 6):
            surface.bezier_curve_to(*points[n : n + 6])
            emitted += 1
        return emitted

    def _emit_straight(self, surface: DrawingSurface, points: Sequence[float]) -> int:
        emitted = 0
        for n in range(2, len(points), 2):
            surface.line_to(points[n], points[n + 1])
            emitted += 1
        return emitted
