"""Drawing surfaces for polyshape.

Shapes render by calling path primitives on a surface. This module
provides the protocol and two concrete surfaces.

Key classes:
- DrawingSurface: Protocol every surface implements
- RecordingSurface: Records primitives for inspection and replay
- SvgPathSurface: Builds SVG path data
"""

from polyshape.surface.base import DrawingSurface
from polyshape.surface.recording import RecordingSurface, replay
from polyshape.surface.svg import SvgPathSurface, format_number

__all__ = [
    "DrawingSurface",
    "RecordingSurface",
    "SvgPathSurface",
    "format_number",
    "replay",
]
