"""Drawing surface protocol.

A surface receives path primitives in order. Shapes never inspect the
surface; they only call these methods.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DrawingSurface(Protocol):
    """Target of path-drawing primitives."""

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill_and_stroke(self) -> None: ...

    def stroke_only(self) -> None: ...
