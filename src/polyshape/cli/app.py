"""The polyshape command.

A single Typer command that renders a JSON shape document to SVG.
"""

from pathlib import Path
from typing import Annotated

import typer

from polyshape import __version__
from polyshape.cli.output import (
    console,
    create_progress,
    print_bounds_table,
    print_document_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from polyshape.config import FillRule, LoggingConfig, PolyShapeSettings, RenderConfig
from polyshape.core.processor import ShapeProcessor
from polyshape.exceptions import DocumentLoadError, DocumentSaveError, PolyShapeError
from polyshape.io import ShapeReader, SvgWriter

app = typer.Typer(
    name="polyshape",
    help="Render polylines, splines and polygons with holes to SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_document: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON shape document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.svg)",
        ),
    ] = None,
    fill_rule: Annotated[
        str,
        typer.Option(
            "--fill-rule",
            help="Fill rule for closed shapes (evenodd|nonzero)",
        ),
    ] = "evenodd",
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places in SVG coordinates",
            min=0,
            max=10,
        ),
    ] = 3,
    show_bounds: Annotated[
        bool,
        typer.Option(
            "--bounds",
            help="Print the bounding box of every shape",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Render and measure without writing output",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render every shape of a JSON document to an SVG file.

    A document is either a single shape object or {"shapes": [...]}, where
    each shape has an exterior point list, optional interiors (holes),
    tension, closed and bezier flags.

    Example:
        polyshape shapes.json

    This will create shapes.svg with one path per shape.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_document.exists():
        print_error(
            f"Input file not found: {input_document}",
            details=f"The file '{input_document}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_document.is_file():
        print_error(
            f"Input path is not a file: {input_document}",
            details="Please provide a path to a JSON shape document.",
        )
        raise typer.Exit(code=1)

    try:
        rule = FillRule(fill_rule.lower())
    except ValueError:
        print_error(
            f"Invalid fill rule: {fill_rule}",
            details="Valid values: evenodd, nonzero",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = PolyShapeSettings(
        render=RenderConfig(fill_rule=rule, precision=precision),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    output_path = output if output is not None else SvgWriter.get_output_path(input_document)

    try:
        if not quiet:
            print_step("Loading document")

        names: list[str] = []
        with ShapeReader(input_document, defaults=settings.shape) as reader:
            shape_count = reader.shape_count
            if verbose:
                names = [shape.name or "" for shape in reader.iter_shapes()]

        if not quiet:
            print_document_info(str(input_document), shape_count)
            if verbose and names:
                console.print(f"  {', '.join(names[:20])}")

        if shape_count == 0:
            if not quiet:
                console.print("\nNo shapes found. Nothing to render.")
            raise typer.Exit(code=0)

        processor = ShapeProcessor(settings)

        if not quiet:
            print_step("Rendering (dry run)" if dry_run else "Rendering")
            with create_progress() as progress:
                task_id = progress.add_task("Rendering", total=shape_count)

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(
                    document_path=input_document,
                    output_path=output_path,
                    dry_run=dry_run,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(
                document_path=input_document,
                output_path=output_path,
                dry_run=dry_run,
            )

        if show_bounds:
            if not quiet:
                print_step("Bounds")
            print_bounds_table(processor.bounds)

        if not quiet:
            print_success(
                output_path=None if dry_run or stats.rendered_count == 0 else str(output_path),
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                primitives=stats.primitives_emitted,
                skipped=stats.skipped_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_shape_time_ms,
            )
            if verbose:
                for name, message in stats.errors:
                    console.print(f"  [red]{name}[/red]: {message}")

        if stats.error_count > 0:
            raise typer.Exit(code=1)

    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save output: {e.reason}")
        raise typer.Exit(code=1)
    except PolyShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
