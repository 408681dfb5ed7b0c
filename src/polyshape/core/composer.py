"""Composition of an exterior ring and its holes into one path.

Each hole is stitched into the exterior's path: after a hole is drawn, a
cut line closes it back to its own first point and the pen jumps back to
the exterior's last point. A single fill then treats the holes as cut out
of the exterior (even-odd always; nonzero when holes wind opposite to the
exterior).

Holes are not checked for containment in the exterior or for overlap with
each other.
"""

import logging
from collections.abc import Callable, Sequence

from polyshape.core.emitter import PathEmitter
from polyshape.surface import DrawingSurface

logger = logging.getLogger(__name__)

TensionProvider = Callable[[Sequence[float]], Sequence[float] | None]


class RingComposer:
    """Renders an exterior ring plus interior rings as one path.

    Example:
        composer = RingComposer(PathEmitter(closed=True), closed=True)
        composer.compose(surface, exterior, [hole])
    """

    def __init__(self, emitter: PathEmitter, closed: bool = False) -> None:
        """Initialize the composer.

        Args:
            emitter: Emitter used for every ring
            closed: Whether the shape is filled and its outline sealed
        """
        self.emitter = emitter
        self.closed = closed

    def compose(
        self,
        surface: DrawingSurface,
        exterior: Sequence[float],
        interiors: Sequence[Sequence[float]] = (),
        tension_points_for: TensionProvider | None = None,
    ) -> int:
        """Emit the whole shape and finish the path.

        An empty exterior is a no-op: nothing is emitted, not even the
        terminal fill or stroke. Empty interior rings are skipped.

        Args:
            surface: Target surface
            exterior: Flat point sequence of the outline
            interiors: Flat point sequences of the holes, in render order
            tension_points_for: Optional lookup returning precomputed tension
                points for a ring, or None to compute them on demand

        Returns:
            Number of primitives emitted, including the terminal operation
        """
        if not exterior:
            logger.debug("Empty exterior, nothing to render")
            return 0

        def _tp(ring: Sequence[float]) -> Sequence[float] | None:
            return tension_points_for(ring) if tension_points_for is not None else None

        emitted = self.emitter.emit(surface, exterior, _tp(exterior))
        drawn_holes = 0

        for ring in interiors:
            if not ring:
                continue
            emitted += self.emitter.emit(surface, ring, _tp(ring))
            # Cut line back to the hole's start, then return to the exterior
            surface.line_to(ring[0], ring[1])
            surface.move_to(exterior[-2], exterior[-1])
            emitted += 2
            drawn_holes += 1

        if self.closed:
            if drawn_holes > 0:
                surface.line_to(exterior[0], exterior[1])
            else:
                surface.close_path()
            surface.fill_and_stroke()
            emitted += 2
        else:
            surface.stroke_only()
            emitted += 1

        logger.debug("Composed path with %d holes, %d primitives", drawn_holes, emitted)
        return emitted
