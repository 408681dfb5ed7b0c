"""Document I/O layer for polyshape.

This module handles reading shape documents and writing rendered output.
It provides a clean abstraction layer between file formats and the
shape model.

Key responsibilities:
- Load and validate JSON shape documents
- Convert document models to PolyLine shapes
- Write rendered shapes as SVG

Key classes:
- ShapeReader: Load documents and yield shapes
- SvgWriter: Save rendered shapes
"""

from polyshape.io.converter import ShapeDocument, ShapeModel, model_to_shape, shape_to_model
from polyshape.io.reader import ShapeReader
from polyshape.io.writer import SvgWriter

__all__ = [
    "ShapeDocument",
    "ShapeModel",
    "ShapeReader",
    "SvgWriter",
    "model_to_shape",
    "shape_to_model",
]
