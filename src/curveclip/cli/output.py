"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library:
headers, step markers, control point tables and error messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from curveclip.domain import CubicControlPoints, Point, QuadraticControlPoints, format_number

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Curveclip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, kind: str, segment_count: int, placement: str) -> None:
    """Print segment document information.

    Args:
        path: Path to the document
        kind: Segment kind ("quadratic" or "cubic")
        segment_count: Number of segments in the document
        placement: Edge placement that will be used
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    line.append(f" ({kind})")
    console.print(line)
    console.print(f"  {segment_count} segments {SYM_DOT} {placement} edge")


def _point(p: Point) -> str:
    return f"({format_number(p.x)}, {format_number(p.y)})"


def print_control_points(
    fitted: list[QuadraticControlPoints] | list[CubicControlPoints],
) -> None:
    """Print fitted control points as a table.

    Args:
        fitted: Fitter output, one entry per segment
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    if fitted and isinstance(fitted[0], CubicControlPoints):
        table.add_column("control 1")
        table.add_column("control 2")
    else:
        table.add_column("control")
    table.add_column("end")

    for idx, dots in enumerate(fitted):
        if isinstance(dots, CubicControlPoints):
            table.add_row(str(idx), _point(dots.control1), _point(dots.control2), _point(dots.end))
        else:
            table.add_row(str(idx), _point(dots.control), _point(dots.end))

    console.print(table)


def print_outline_summary(commands: int, curves: int, closed: bool, finite: bool) -> None:
    """Print a one-line outline summary plus a warning for degenerate output."""
    state = "closed" if closed else "open"
    console.print(f"  {commands} commands {SYM_DOT} {curves} curves {SYM_DOT} {state}")
    if not finite:
        console.print(
            f"  [yellow]{SYM_WARN} Outline contains NaN/Infinity coordinates "
            "(degenerate segment)[/yellow]"
        )


def print_success(output_path: str) -> None:
    """Print success message for a written file."""
    line = Text(f"\n{SYM_OK} Wrote ", style="bold green")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
