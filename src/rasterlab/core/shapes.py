"""Compound shapes built from the line rasterizer, plus collecting helpers."""

from rasterlab.core.raster import PlotFn, rasterize_circle, rasterize_line
from rasterlab.domain import Point


def draw_triangle(p1: Point, p2: Point, p3: Point, plot: PlotFn) -> None:
    """Rasterize a triangle outline as the edges p1->p2, p2->p3, p3->p1.

    Degenerate triangles are drawn as-is; shared vertices are plotted once
    per edge that touches them.
    """
    rasterize_line(p1, p2, plot)
    rasterize_line(p2, p3, plot)
    rasterize_line(p3, p1, plot)


def _recorder() -> tuple[list[Point], PlotFn]:
    points: list[Point] = []

    def record(x: int, y: int) -> None:
        points.append(Point(x, y))

    return points, record


def collect_line(p0: Point, p1: Point) -> list[Point]:
    """Return the pixels of a line in plotting order."""
    points, record = _recorder()
    rasterize_line(p0, p1, record)
    return points


def collect_circle(center: Point, radius: int) -> list[Point]:
    """Return the pixels of a circle in plotting order, duplicates included."""
    points, record = _recorder()
    rasterize_circle(center, radius, record)
    return points


def collect_triangle(p1: Point, p2: Point, p3: Point) -> list[Point]:
    """Return the pixels of a triangle outline in plotting order."""
    points, record = _recorder()
    draw_triangle(p1, p2, p3, record)
    return points
