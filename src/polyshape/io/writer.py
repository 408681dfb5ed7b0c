"""SVG writer for rendered shapes.

This module provides the SvgWriter class, which renders shapes through an
SvgPathSurface and saves them as one SVG document.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from polyshape.config import RenderConfig
from polyshape.core.shape import PolyLine
from polyshape.domain import BoundingBox
from polyshape.exceptions import DocumentSaveError
from polyshape.surface import SvgPathSurface, format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgWriter:
    """Writes shapes to an SVG document.

    Example:
        writer = SvgWriter(Path("output.svg"))
        writer.add_shape(shape)
        writer.save()
    """

    def __init__(self, output_path: Path, config: RenderConfig | None = None) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the document will be saved
            config: Styling and precision settings
        """
        self._output_path = output_path
        self._config = config or RenderConfig()
        self._paths: list[tuple[str | None, SvgPathSurface]] = []
        self._bounds: list[BoundingBox] = []

    @property
    def path_count(self) -> int:
        """Number of shapes added so far."""
        return len(self._paths)

    def add_shape(self, shape: PolyLine) -> int:
        """Render a shape into the document.

        Shapes with an empty exterior produce no path element.

        Args:
            shape: Shape to render

        Returns:
            Number of primitives emitted
        """
        surface = SvgPathSurface(precision=self._config.precision)
        emitted = shape.render(surface)
        if emitted == 0:
            return 0

        self._paths.append((shape.name, surface))
        self._bounds.append(shape.compute_bounds())
        return emitted

    def view_box(self) -> tuple[float, float, float, float]:
        """Union of the shapes' bounds, padded by half the stroke width."""
        if not self._bounds:
            return (0.0, 0.0, 0.0, 0.0)

        pad = self._config.stroke_width / 2
        min_x = min(b.x for b in self._bounds) - pad
        min_y = min(b.y for b in self._bounds) - pad
        max_x = max(b.x + b.width for b in self._bounds) + pad
        max_y = max(b.y + b.height for b in self._bounds) + pad
        return (min_x, min_y, max_x - min_x, max_y - min_y)

    def to_element(self) -> ET.Element:
        """Build the SVG element tree."""
        config = self._config
        precision = config.precision
        vb = self.view_box()

        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "viewBox": " ".join(format_number(v, precision) for v in vb),
                "width": format_number(vb[2], precision),
                "height": format_number(vb[3], precision),
            },
        )

        for name, surface in self._paths:
            attrs = {
                "d": surface.d,
                "fill": config.fill if surface.filled else "none",
                "stroke": config.stroke,
                "stroke-width": format_number(config.stroke_width, precision),
            }
            if surface.filled:
                attrs["fill-rule"] = config.fill_rule.value
            if name:
                attrs["id"] = name
            ET.SubElement(root, "path", attrs)

        return root

    def to_string(self) -> str:
        """Serialize the document to a string."""
        tree = ET.ElementTree(self.to_element())
        ET.indent(tree)
        return ET.tostring(tree.getroot(), encoding="unicode")

    def save(self) -> None:
        """Save the document to the output path.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        try:
            self._output_path.write_text(self.to_string() + "\n", encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a document.

        Converts: shapes.json -> shapes.svg

        Args:
            input_path: Shape document path

        Returns:
            Path with the .svg extension next to the input
        """
        return input_path.with_suffix(".svg")
