"""Document rendering orchestration.

This module coordinates the full workflow for a shape document: load and
validate the shapes, render each one, and save the SVG output.

Key components:
- render_shape: Render one shape onto a recording surface, with timing
- ShapeProcessor: Main orchestrator class for document rendering, and fill
  checks under the configured fill rule
"""

import time
import traceback
from collections.abc import Callable
from pathlib import Path

from polyshape.config import PolyShapeSettings
from polyshape.core.geometry import is_point_filled
from polyshape.core.shape import PolyLine
from polyshape.domain import BoundingBox, PathCommand
from polyshape.io import ShapeReader, SvgWriter
from polyshape.surface import RecordingSurface
from polyshape.utils import RenderLogger, RenderStats, configure_logging


def render_shape(shape: PolyLine) -> tuple[list[PathCommand], float]:
    """Render a single shape onto a fresh recording surface.

    Args:
        shape: Shape to render

    Returns:
        Tuple of (recorded commands, duration in milliseconds)
    """
    start_time = time.perf_counter()
    surface = RecordingSurface()
    shape.render(surface)
    duration_ms = (time.perf_counter() - start_time) * 1000
    return surface.commands, duration_ms


class ShapeProcessor:
    """Orchestrates rendering of a shape document.

    Manages the complete workflow:
    1. Load the document
    2. Render each shape, skipping empty ones
    3. Collect bounds and statistics
    4. Save the SVG output (unless running dry)

    Example:
        settings = PolyShapeSettings()
        processor = ShapeProcessor(settings)
        stats = processor.process(
            document_path=Path("shapes.json"),
            output_path=Path("shapes.svg"),
        )
    """

    def __init__(self, config: PolyShapeSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Polyshape settings containing shape, render and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.render_logger = RenderLogger(self.logger)
        self.bounds: dict[str, BoundingBox] = {}

    def process(
        self,
        document_path: Path,
        output_path: Path | None = None,
        dry_run: bool = False,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> RenderStats:
        """Render every shape of a document.

        A shape that fails to render is logged and counted; the remaining
        shapes are still rendered.

        Args:
            document_path: Path to the JSON shape document
            output_path: Path for the SVG output (derived from the input if None)
            dry_run: If True, render and measure but do not write output
            progress_callback: Optional callback(completed, total, shape_name, success)

        Returns:
            RenderStats with counts, timing and error details

        Raises:
            FileNotFoundError: If the document does not exist
            DocumentLoadError: If the document is invalid
            DocumentSaveError: If the output cannot be written
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        if output_path is None:
            output_path = SvgWriter.get_output_path(document_path)

        self.logger.info(
            "Starting document rendering",
            document=str(document_path),
            output=str(output_path),
            dry_run=dry_run,
        )

        with ShapeReader(document_path, defaults=self.config.shape) as reader:
            shapes = list(reader.iter_shapes())

        writer = SvgWriter(output_path, self.config.render)
        total = len(shapes)

        for completed, shape in enumerate(shapes, start=1):
            name = shape.name or f"shape-{completed - 1}"
            success = True

            if not shape.exterior:
                self.render_logger.log_shape_skipped(name, "empty exterior")
            else:
                self.render_logger.log_shape_start(name)
                try:
                    commands, duration_ms = render_shape(shape)
                    writer.add_shape(shape)
                    bounds = shape.compute_bounds()
                    self.bounds[name] = bounds
                    self.render_logger.log_shape_bounds(
                        name, bounds.x, bounds.y, bounds.width, bounds.height
                    )
                    self.render_logger.log_shape_complete(name, len(commands), duration_ms)
                except Exception as e:
                    success = False
                    self.render_logger.log_shape_error(name, e, traceback.format_exc())

            if progress_callback is not None:
                progress_callback(completed, total, name, success)

        if not dry_run and writer.path_count > 0:
            writer.save()
            self.logger.info("Output saved", output=str(output_path), paths=writer.path_count)
        elif not dry_run:
            self.logger.warning("No shapes rendered, output not written")

        stats.end_time = time.time()
        self.logger.info(
            "Document rendering complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats

    def is_filled(self, shape: PolyLine, x: float, y: float) -> bool:
        """Check whether a rendered shape covers a point.

        Uses the configured fill rule and flatten tolerance, so the answer
        matches what the written SVG shows.

        Args:
            shape: Shape to evaluate
            x: X coordinate of the sample point
            y: Y coordinate of the sample point

        Returns:
            True if the point lies in a filled region of the shape
        """
        commands, _ = render_shape(shape)
        render = self.config.render
        return is_point_filled(commands, x, y, render.fill_rule, render.flatten_tolerance)
