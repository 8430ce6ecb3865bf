"""CLI application entry point for rasterlab.

This module provides the main CLI interface using Typer.
"""

import math
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.prompt import Prompt

from rasterlab import __version__
from rasterlab.cli.output import (
    console,
    print_canvas,
    print_commands,
    print_error,
    print_header,
    print_points,
    print_step,
    print_success,
    print_transform_report,
)
from rasterlab.config import CanvasConfig, LoggingConfig, RasterLabSettings
from rasterlab.core import collect_circle, collect_line, collect_triangle
from rasterlab.domain import Point, Triangle, color_by_name
from rasterlab.exceptions import RasterLabError, UnknownCommandError
from rasterlab.render import Session

# Create the Typer app
app = typer.Typer(
    name="rasterlab",
    help="Rasterize lines, circles and transformed triangles on an integer pixel grid.",
    add_completion=False,
    no_args_is_help=True,
)

WidthOption = Annotated[
    int,
    typer.Option("--width", help="Canvas width in pixels", min=1, max=4096),
]
HeightOption = Annotated[
    int,
    typer.Option("--height", help="Canvas height in pixels", min=1, max=4096),
]
ColorOption = Annotated[
    str | None,
    typer.Option("--color", "-c", help="Palette name or #rrggbb (default from palette)"),
]
PointsOption = Annotated[
    bool,
    typer.Option("--points", help="List plotted coordinates instead of drawing"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rasterlab[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Classic raster graphics algorithms on an integer pixel grid."""


def parse_point(value: str, name: str) -> Point:
    """Parse an "x,y" option value into a Point.

    Raises:
        typer.BadParameter: If the value is not two comma separated integers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"expected x,y but got {value!r}", param_hint=name)
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise typer.BadParameter(
            f"coordinates must be integers, got {value!r}", param_hint=name
        ) from None


def _build_settings(
    width: int,
    height: int,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> RasterLabSettings:
    return RasterLabSettings(
        canvas=CanvasConfig(width=width, height=height),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )


def _run(action: Callable[[], None]) -> None:
    """Run a command body, mapping domain errors to exit code 1."""
    try:
        action()
    except typer.Exit:
        raise
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def line(
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="Start point x,y (default 10,12)"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="End point x,y (default 26,22)"),
    ] = None,
    color: ColorOption = None,
    points: PointsOption = False,
    width: WidthOption = 64,
    height: HeightOption = 64,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw a line with Bresenham's algorithm.

    Example:
        rasterlab line --start 10,12 --end 26,22
    """
    settings = _build_settings(width, height, log_file, log_level, quiet)
    default_start, default_end = settings.demo.line_points()
    p0 = parse_point(start, "--start") if start else default_start
    p1 = parse_point(end, "--end") if end else default_end

    def action() -> None:
        if points:
            print_points(collect_line(p0, p1))
            return
        session = Session(settings)
        session.draw_line(p0, p1, color_by_name(color) if color else None)
        print_canvas(session.canvas)
        if not quiet:
            print_success(f"Line {p0} -> {p1}", session.stats)

    _run(action)


@app.command()
def circle(
    center: Annotated[
        str | None,
        typer.Option("--center", help="Center point x,y (default -3,-3)"),
    ] = None,
    radius: Annotated[
        int | None,
        typer.Option("--radius", "-r", help="Radius in pixels (default 8)"),
    ] = None,
    color: ColorOption = None,
    points: PointsOption = False,
    width: WidthOption = 64,
    height: HeightOption = 64,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw a circle with the midpoint algorithm.

    Example:
        rasterlab circle --center -3,-3 --radius 8
    """
    settings = _build_settings(width, height, log_file, log_level, quiet)
    c = parse_point(center, "--center") if center else settings.demo.circle_point()
    r = settings.demo.circle_radius if radius is None else radius

    def action() -> None:
        if points:
            print_points(collect_circle(c, r))
            return
        session = Session(settings)
        session.draw_circle(c, r, color_by_name(color) if color else None)
        print_canvas(session.canvas)
        if not quiet:
            print_success(f"Circle {c} r={r}", session.stats)

    _run(action)


def _triangle_from_options(
    settings: RasterLabSettings,
    a: str | None,
    b: str | None,
    c: str | None,
) -> Triangle:
    default = settings.demo.triangle_shape()
    return Triangle(
        parse_point(a, "--a") if a else default.a,
        parse_point(b, "--b") if b else default.b,
        parse_point(c, "--c") if c else default.c,
    )


VertexAOption = Annotated[str | None, typer.Option("--a", help="Vertex A x,y (default 0,0)")]
VertexBOption = Annotated[str | None, typer.Option("--b", help="Vertex B x,y (default 1,1)")]
VertexCOption = Annotated[str | None, typer.Option("--c", help="Vertex C x,y (default 5,2)")]


@app.command()
def triangle(
    a: VertexAOption = None,
    b: VertexBOption = None,
    c: VertexCOption = None,
    color: ColorOption = None,
    points: PointsOption = False,
    width: WidthOption = 64,
    height: HeightOption = 64,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw a triangle outline as three Bresenham lines.

    Example:
        rasterlab triangle --a 0,0 --b 10,20 --c 25,-5
    """
    settings = _build_settings(width, height, log_file, log_level, quiet)
    shape = _triangle_from_options(settings, a, b, c)

    def action() -> None:
        if points:
            print_points(collect_triangle(shape.a, shape.b, shape.c))
            return
        session = Session(settings)
        draw_color = color_by_name(color or settings.palette.triangle_initial)
        session.draw_triangle(shape, draw_color)
        print_canvas(session.canvas)
        if not quiet:
            print_success(f"Triangle {shape}", session.stats)

    _run(action)


@app.command()
def transform(
    a: VertexAOption = None,
    b: VertexBOption = None,
    c: VertexCOption = None,
    offset: Annotated[
        str | None,
        typer.Option("--translate", "-t", help="Translation dx,dy (default 5,1)"),
    ] = None,
    angle: Annotated[
        float | None,
        typer.Option("--angle", help="Counter-clockwise rotation in degrees (default 90)"),
    ] = None,
    width: WidthOption = 64,
    height: HeightOption = 64,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Translate, rotate and reflect a triangle, drawing it before and after.

    The initial triangle is drawn in blue and the final one in red.

    Example:
        rasterlab transform --translate 5,1 --angle 90
    """
    settings = _build_settings(width, height, log_file, log_level, quiet)
    shape = _triangle_from_options(settings, a, b, c)
    if offset:
        settings.demo.translation = parse_point(offset, "--translate").to_tuple()
    if angle is not None:
        if not math.isfinite(angle):
            raise typer.BadParameter(
                f"angle must be finite, got {angle}", param_hint="--angle"
            )
        settings.demo.rotation_degrees = angle

    def action() -> None:
        session = Session(settings)
        report = session.apply_transformations(shape)
        if not quiet:
            print_step("Applying 2D transformations")
        print_transform_report(report)
        print_canvas(session.canvas)

    _run(action)


@app.command()
def interactive(
    width: WidthOption = 64,
    height: HeightOption = 64,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Read single-key commands and redraw the canvas after each one.

    Keys: 1 line, 2 circle, 3 triangle transforms, C clear, Q quit.
    """
    settings = _build_settings(width, height, log_file, log_level, quiet=False)

    def action() -> None:
        session = Session(settings)
        print_header(__version__)
        print_commands(Session.COMMANDS)

        while True:
            try:
                key = Prompt.ask("\nCommand", console=console)
            except EOFError:
                break
            try:
                if not session.dispatch(key):
                    break
            except UnknownCommandError as e:
                print_error(str(e))
                continue
            print_canvas(session.canvas)

        print_success("Session closed", session.stats)

    _run(action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
