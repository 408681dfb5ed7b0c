"""Rich console output helpers for the CLI.

Everything the render command prints goes through the shared console here:
the header, step markers, the progress bar, the bounds table and the
closing summary.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from polyshape.domain import BoundingBox

console = Console()

# Status markers
SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for shape rendering.

    Returns:
        Progress bound to the shared console
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(document_path: str, shape_count: int) -> None:
    """Print document information.

    Args:
        document_path: Path to the shape document
        shape_count: Number of shapes in the document
    """
    # Text keeps brackets in paths from being read as markup
    line = Text("  ")
    line.append(document_path)
    console.print(line)
    plural = "shape" if shape_count == 1 else "shapes"
    console.print(f"  {shape_count:,} {plural}")


def print_bounds_table(bounds: dict[str, BoundingBox]) -> None:
    """Print the bounding box of every rendered shape.

    Args:
        bounds: Bounding boxes keyed by shape name
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Shape")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("width", justify="right")
    table.add_column("height", justify="right")

    for name, box in bounds.items():
        table.add_row(name, str(box.x), str(box.y), str(box.width), str(box.height))

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    rendered: int,
    primitives: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file, or None for a dry run
        total_time_s: Total processing time in seconds
        rendered: Number of shapes rendered
        primitives: Total number of path primitives emitted
        skipped: Number of shapes skipped
        errors: Number of errors encountered
        avg_time_ms: Average render time per shape in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} shapes {SYM_DOT} {primitives} primitives {SYM_DOT} "
        f"{skipped} skipped {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per shape")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
