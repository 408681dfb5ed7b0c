"""The PolyLine shape.

A PolyLine is one exterior ring plus any number of interior rings (holes),
rendered as straight segments, a tension spline, or a cubic bezier chain.
Open shapes are stroked; closed shapes are sealed and filled.

Property changes fire ``<name>_change`` events. The shape listens to its own
exterior, tension, closed and bezier events to drop its cached tension
points; the cache is also keyed by a snapshot of those inputs, so it is
never consulted for values it was not computed from.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Sequence
from typing import Any

from polyshape.core.bounds import compute_bounds, effective_points
from polyshape.core.composer import RingComposer
from polyshape.core.emitter import PathEmitter
from polyshape.core.tension import tension_points
from polyshape.domain import BoundingBox, RenderMode, validate_points
from polyshape.exceptions import UsageError
from polyshape.surface import DrawingSurface

logger = logging.getLogger(__name__)

ChangeHandler = Callable[[str, Any, Any], None]

_TENSION_INPUTS = ("exterior", "tension", "closed", "bezier")


class PolyLine:
    """A polyline, spline, polygon or blob with optional holes.

    Example:
        shape = PolyLine(
            exterior=[0, 0, 100, 0, 100, 100, 0, 100],
            interiors=[[25, 25, 75, 25, 75, 75, 25, 75]],
            closed=True,
        )
        shape.render(surface)
        shape.compute_bounds()  # BoundingBox(x=0, y=0, width=100, height=100)

    Attributes:
        name: Optional identifier, used in logs and output
    """

    def __init__(
        self,
        exterior: Sequence[float] = (),
        interiors: Sequence[Sequence[float]] = (),
        tension: float = 0.0,
        closed: bool = False,
        bezier: bool = False,
        name: str | None = None,
    ) -> None:
        self.name = name
        self._listeners: dict[str, list[ChangeHandler]] = defaultdict(list)
        self._tension_cache: tuple[tuple[Any, ...], list[float]] | None = None

        self._exterior = validate_points(exterior, "exterior")
        self._interiors = [
            validate_points(ring, f"interiors[{i}]") for i, ring in enumerate(interiors)
        ]
        self._tension = float(tension)
        self._closed = bool(closed)
        self._bezier = bool(bezier)

        self.on(" ".join(f"{attr}_change" for attr in _TENSION_INPUTS), self._clear_tension_cache)

    # -- change notification -------------------------------------------------

    def on(self, events: str, handler: ChangeHandler) -> "PolyLine":
        """Register a handler for one or more space-separated events.

        Handlers are called as ``handler(attr, old_value, new_value)``.

        Args:
            events: Event names, e.g. "tension_change closed_change"
            handler: Callback

        Returns:
            The shape, for chaining
        """
        for event in events.split():
            self._listeners[event].append(handler)
        return self

    def off(self, events: str, handler: ChangeHandler) -> "PolyLine":
        """Remove a handler previously registered with on()."""
        for event in events.split():
            if handler in self._listeners.get(event, []):
                self._listeners[event].remove(handler)
        return self

    def _fire(self, attr: str, old: Any, new: Any) -> None:
        for handler in list(self._listeners.get(f"{attr}_change", [])):
            handler(attr, old, new)

    def _set(self, attr: str, value: Any) -> None:
        slot = f"_{attr}"
        old = getattr(self, slot)
        setattr(self, slot, value)
        if old != value:
            self._fire(attr, old, value)

    def _clear_tension_cache(self, attr: str, _old: Any, _new: Any) -> None:
        if self._tension_cache is not None:
            logger.debug("Tension cache cleared by %s change", attr)
        self._tension_cache = None

    # -- properties ----------------------------------------------------------

    @property
    def exterior(self) -> list[float]:
        """Flat point sequence of the outline (copy)."""
        return list(self._exterior)

    @exterior.setter
    def exterior(self, points: Sequence[float]) -> None:
        self._set("exterior", validate_points(points, "exterior"))

    @property
    def interiors(self) -> list[list[float]]:
        """Flat point sequences of the holes, in render order (copies)."""
        return [list(ring) for ring in self._interiors]

    @interiors.setter
    def interiors(self, rings: Sequence[Sequence[float]]) -> None:
        self._set(
            "interiors",
            [validate_points(ring, f"interiors[{i}]") for i, ring in enumerate(rings)],
        )

    @property
    def tension(self) -> float:
        """Curve smoothing; 0 disables spline interpolation."""
        return self._tension

    @tension.setter
    def tension(self, value: float) -> None:
        self._set("tension", float(value))

    @property
    def closed(self) -> bool:
        """Whether the outline wraps around and the shape is filled."""
        return self._closed

    @closed.setter
    def closed(self, value: bool) -> None:
        self._set("closed", bool(value))

    @property
    def bezier(self) -> bool:
        """Whether points form a cubic bezier chain when tension is 0."""
        return self._bezier

    @bezier.setter
    def bezier(self, value: bool) -> None:
        self._set("bezier", bool(value))

    # -- interior ring access ------------------------------------------------

    def get_interior_at(self, index: int) -> list[float] | None:
        """Return a copy of the hole at an index.

        Args:
            index: Position in the interiors list

        Returns:
            The ring, or None when the index is out of range (including
            negative indices)
        """
        if 0 <= index < len(self._interiors):
            return list(self._interiors[index])
        return None

    def set_interior_at(self, index: int, ring: Sequence[float]) -> "PolyLine":
        """Replace the hole at an index.

        Writing at ``len(interiors)`` appends. Writing further out pads the
        gap with empty rings, which render as nothing.

        Args:
            index: Position in the interiors list
            ring: Flat point sequence of the hole

        Returns:
            The shape, for chaining

        Raises:
            UsageError: If the index is negative
            PointSequenceError: If the ring is malformed
        """
        if index < 0:
            raise UsageError("set_interior_at", f"negative index {index}")

        rings = [list(r) for r in self._interiors]
        if index >= len(rings):
            rings.extend([] for _ in range(index + 1 - len(rings)))
        rings[index] = validate_points(ring, f"interiors[{index}]")
        self._set("interiors", rings)
        return self

    def interior(self, *args: Any) -> Any:
        """Read or write a hole by position.

        ``interior(i)`` behaves like get_interior_at(i) and
        ``interior(i, ring)`` like set_interior_at(i, ring).

        Raises:
            UsageError: For any other number of arguments
        """
        if len(args) == 1:
            return self.get_interior_at(args[0])
        if len(args) == 2:
            return self.set_interior_at(args[0], args[1])
        raise UsageError("interior", f"expected 1 or 2 arguments, got {len(args)}")

    # -- derived values ------------------------------------------------------

    def _tension_key(self) -> tuple[Any, ...]:
        return (tuple(self._exterior), self._tension, self._closed)

    def get_tension_points(self) -> list[float]:
        """Return the exterior's tension points, memoized.

        Returns:
            Copy of the cached tension points
        """
        key = self._tension_key()
        if self._tension_cache is not None and self._tension_cache[0] == key:
            return list(self._tension_cache[1])

        logger.debug("Computing tension points for %s", self.name or "shape")
        computed = tension_points(self._exterior, self._tension, self._closed)
        self._tension_cache = (key, computed)
        return list(computed)

    @property
    def render_mode(self) -> RenderMode:
        """Rendering mode of the exterior ring."""
        return PathEmitter(self._tension, self._closed, self._bezier).mode_for(self._exterior)

    def compute_bounds(self) -> BoundingBox:
        """Compute the integer bounding box of the outline.

        Returns:
            BoundingBox of the tension points when tension is active, of the
            raw exterior otherwise; holes are not included
        """
        expanded = self.get_tension_points() if self._tension != 0 else None
        return compute_bounds(
            effective_points(self._exterior, self._tension, self._closed, expanded)
        )

    @property
    def width(self) -> int:
        return self.compute_bounds().width

    @property
    def height(self) -> int:
        return self.compute_bounds().height

    # -- rendering -----------------------------------------------------------

    def render(self, surface: DrawingSurface) -> int:
        """Draw the shape onto a surface.

        Args:
            surface: Target surface

        Returns:
            Number of primitives emitted
        """
        emitter = PathEmitter(self._tension, self._closed, self._bezier)
        composer = RingComposer(emitter, closed=self._closed)

        def _cached(ring: Sequence[float]) -> Sequence[float] | None:
            if ring is self._exterior and self._tension != 0:
                return self.get_tension_points()
            return None

        return composer.compose(surface, self._exterior, self._interiors, _cached)

    # -- serialization -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the shape's properties
        """
        data: dict[str, Any] = {
            "exterior": self.exterior,
            "interiors": self.interiors,
            "tension": self._tension,
            "closed": self._closed,
            "bezier": self._bezier,
        }
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolyLine":
        """Deserialize from dictionary.

        Missing keys take their defaults.

        Args:
            data: Dictionary representation of a shape

        Returns:
            PolyLine instance
        """
        return cls(
            exterior=data.get("exterior", ()),
            interiors=data.get("interiors", ()),
            tension=data.get("tension", 0.0),
            closed=data.get("closed", False),
            bezier=data.get("bezier", False),
            name=data.get("name"),
        )

    def __repr__(self) -> str:
        return (
            f"PolyLine(name={self.name!r}, points={len(self._exterior) // 2}, "
            f"interiors={len(self._interiors)}, tension={self._tension}, "
            f"closed={self._closed}, bezier={self._bezier})"
        )
