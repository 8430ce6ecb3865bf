"""Interactive drawing session.

This module maps single-key commands onto the core algorithms and a Canvas,
replacing a window event loop with an explicit dispatcher that can be driven
from a prompt or from tests.

Key components:
- Session: Owns the canvas and dispatches commands
- TransformReport: Vertices of the demo triangle after each transform step
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

import structlog

from rasterlab.config import RasterLabSettings
from rasterlab.core import (
    PlotFn,
    draw_triangle,
    rasterize_circle,
    rasterize_line,
    reflect_across_y_axis,
    rotate,
    translate,
)
from rasterlab.domain import Color, Point, Triangle
from rasterlab.exceptions import UnknownCommandError
from rasterlab.render.canvas import Canvas
from rasterlab.utils import RenderLogger, RenderStats, configure_logging


@dataclass
class TransformReport:
    """Triangle vertices recorded after each transform step."""

    stages: list[tuple[str, Triangle]] = field(default_factory=list)

    def add(self, name: str, triangle: Triangle) -> None:
        self.stages.append((name, triangle))

    @property
    def initial(self) -> Triangle:
        return self.stages[0][1]

    @property
    def final(self) -> Triangle:
        return self.stages[-1][1]


class _CountingPlot:
    """Plot callback wrapper that counts calls."""

    def __init__(self, plot: PlotFn) -> None:
        self._plot = plot
        self.count = 0

    def __call__(self, x: int, y: int) -> None:
        self.count += 1
        self._plot(x, y)


class Session:
    """Dispatches drawing commands against a canvas.

    Commands:
        1: Draw the configured line
        2: Draw the configured circle
        3: Transform the configured triangle and draw before/after
        c: Clear the canvas
        q: Quit

    Example:
        session = Session(get_default_settings())
        session.dispatch("1")
        session.dispatch("3")
    """

    COMMANDS: ClassVar[dict[str, str]] = {
        "1": "Draw Bresenham line",
        "2": "Draw midpoint circle",
        "3": "Apply 2D transformations to triangle",
        "c": "Clear canvas",
        "q": "Quit",
    }

    def __init__(
        self,
        settings: RasterLabSettings,
        canvas: Canvas | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        if canvas is None:
            canvas_config = settings.canvas
            canvas = Canvas(
                width=canvas_config.width,
                height=canvas_config.height,
                pixel_size=canvas_config.pixel_size,
                background=canvas_config.background_color(),
                axis_color=canvas_config.axis_color(),
            )
        self.canvas = canvas

        if logger is None:
            logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
            )
        self.logger = logger
        self.render_logger = RenderLogger(logger)

        self._handlers: dict[str, Callable[[], object]] = {
            "1": self.draw_line,
            "2": self.draw_circle,
            "3": self.apply_transformations,
            "c": self.clear,
        }

    @property
    def stats(self) -> RenderStats:
        """Get render statistics for this session."""
        return self.render_logger.stats

    def dispatch(self, key: str) -> bool:
        """Run the command bound to a key.

        Args:
            key: Command key (case-insensitive, surrounding whitespace ignored)

        Returns:
            False if the command was quit, True otherwise

        Raises:
            UnknownCommandError: If the key is not bound to a command
        """
        normalized = key.strip().lower()
        if normalized not in self.COMMANDS:
            raise UnknownCommandError(key)

        self.render_logger.log_command(normalized)
        if normalized == "q":
            return False

        self._handlers[normalized]()
        return True

    def _counting(self, color: Color) -> _CountingPlot:
        return _CountingPlot(self.canvas.plotter(color))

    def draw_line(
        self,
        start: Point | None = None,
        end: Point | None = None,
        color: Color | None = None,
    ) -> int:
        """Draw a line, defaulting to the configured demo line.

        Returns:
            Number of plot calls made
        """
        default_start, default_end = self.settings.demo.line_points()
        if start is None:
            start = default_start
        if end is None:
            end = default_end
        plot = self._counting(color or self.settings.palette.resolve("line"))

        rasterize_line(start, end, plot)
        self.render_logger.log_line(start, end, plot.count)
        return plot.count

    def draw_circle(
        self,
        center: Point | None = None,
        radius: int | None = None,
        color: Color | None = None,
    ) -> int:
        """Draw a circle, defaulting to the configured demo circle.

        Returns:
            Number of plot calls made
        """
        if center is None:
            center = self.settings.demo.circle_point()
        radius = self.settings.demo.circle_radius if radius is None else radius
        plot = self._counting(color or self.settings.palette.resolve("circle"))

        rasterize_circle(center, radius, plot)
        self.render_logger.log_circle(center, radius, plot.count)
        return plot.count

    def draw_triangle(self, triangle: Triangle, color: Color) -> int:
        """Draw a triangle outline.

        Returns:
            Number of plot calls made
        """
        plot = self._counting(color)
        draw_triangle(triangle.a, triangle.b, triangle.c, plot)
        self.render_logger.log_triangle(triangle, plot.count)
        return plot.count

    def apply_transformations(self, triangle: Triangle | None = None) -> TransformReport:
        """Translate, rotate and reflect a triangle, drawing it before and after.

        Each step is applied to every vertex before the next step starts.

        Returns:
            Report with the triangle after each step
        """
        demo = self.settings.demo
        palette = self.settings.palette
        tx, ty = demo.translation
        angle = demo.rotation_degrees

        report = TransformReport()
        shape = demo.triangle_shape() if triangle is None else triangle
        report.add("initial", shape)
        self.draw_triangle(shape, palette.resolve("triangle_initial"))

        steps: list[tuple[str, Callable[[Point], Point]]] = [
            (f"translate({tx},{ty})", lambda p: translate(p, tx, ty)),
            (f"rotate({angle:g})", lambda p: rotate(p, angle)),
            ("reflect_y", reflect_across_y_axis),
        ]
        for name, step in steps:
            shape = shape.map(step)
            report.add(name, shape)
            self.render_logger.log_transform_stage(name, shape)

        self.draw_triangle(shape, palette.resolve("triangle_final"))
        return report

    def clear(self) -> None:
        """Reset the canvas to background and axes."""
        self.canvas.clear()
        self.render_logger.log_clear()
