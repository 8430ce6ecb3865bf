"""Rich console output helpers for the CLI.

This module renders canvases, point listings and transform reports to the
terminal using the Rich library.
"""

from rich.color import Color as RichColor
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from rasterlab.domain import Color, Point
from rasterlab.render import Canvas, TransformReport
from rasterlab.utils import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
HALF_BLOCK = "▀"  # Upper half block, one terminal cell holds two pixel rows


def _rich_color(color: Color) -> RichColor:
    return RichColor.from_rgb(*color.to_rgb())


def render_canvas(canvas: Canvas) -> Text:
    """Render a canvas as half-block characters.

    Each terminal cell shows two device rows: the foreground paints the
    upper pixel and the background paints the lower one. Alpha is ignored.

    Args:
        canvas: Canvas to render

    Returns:
        Rich Text with one line per pair of device rows
    """
    text = Text()
    rows = list(canvas.rows())
    for top in range(0, len(rows), 2):
        upper = rows[top]
        lower = rows[top + 1] if top + 1 < len(rows) else [canvas.background] * canvas.width
        for up, down in zip(upper, lower, strict=True):
            text.append(
                HALF_BLOCK,
                style=Style(color=_rich_color(up), bgcolor=_rich_color(down)),
            )
        text.append("\n")
    return text


def print_canvas(canvas: Canvas) -> None:
    """Print a canvas to the console."""
    console.print(render_canvas(canvas), end="")


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rasterlab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_commands(commands: dict[str, str]) -> None:
    """Print the interactive command list.

    Args:
        commands: Mapping of key to description
    """
    console.print("Commands:")
    for key, description in commands.items():
        console.print(f"  {key.upper()} {SYM_DOT} {description}")


def print_points(points: list[Point]) -> None:
    """Print plotted points in plotting order.

    Args:
        points: Points returned by a collecting rasterizer
    """
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for index, point in enumerate(points):
        table.add_row(str(index), str(point.x), str(point.y))
    console.print(table)
    console.print(f"  {len(points)} points {SYM_DOT} {len(set(points))} unique")


def print_transform_report(report: TransformReport) -> None:
    """Print the triangle vertices after each transform step.

    Args:
        report: Report produced by Session.apply_transformations
    """
    for name, triangle in report.stages:
        line = Text(f"  {name:<16} ")
        line.append(str(triangle), style="bold")
        console.print(line)


def print_success(message: str, stats: RenderStats) -> None:
    """Print success message with a render summary.

    Args:
        message: Short description of what was drawn
        stats: Session statistics
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    console.print(
        f"  {stats.shapes_drawn} shapes {SYM_DOT} {stats.pixels_plotted} pixels plotted"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
