"""Integer-only rasterization of lines and circles.

The rasterizers never touch a pixel surface. They call a plot callback with
model-space coordinates once per generated pixel and leave device mapping and
color to the caller.

Key functions:
- rasterize_line: Bresenham's line algorithm for all octants
- rasterize_circle: Midpoint circle algorithm with 8-way symmetry
- plot_symmetric: Emit the 8 reflections of an octant point
"""

from collections.abc import Callable

from rasterlab.domain import Point
from rasterlab.exceptions import InvalidRadiusError

PlotFn = Callable[[int, int], None]


def rasterize_line(p0: Point, p1: Point, plot: PlotFn) -> None:
    """Rasterize a line segment with Bresenham's algorithm.

    Uses the single error term formulation that covers every octant. Both
    endpoints are plotted, and the path between them is 8-connected. The
    number of plot calls is max(|dx|, |dy|) + 1.

    Args:
        p0: Start point
        p1: End point
        plot: Callback invoked with (x, y) for each pixel
    """
    x, y = p0.x, p0.y
    x1, y1 = p1.x, p1.y

    dx = abs(x1 - x)
    sx = 1 if x < x1 else -1
    dy = -abs(y1 - y)
    sy = 1 if y < y1 else -1
    err = dx + dy

    plot(x, y)
    while (x, y) != (x1, y1):
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
        plot(x, y)


def plot_symmetric(center: Point, x: int, y: int, plot: PlotFn) -> None:
    """Plot the 8 reflections of an octant offset around a center.

    Duplicates are not filtered: on the axes and the diagonals the same pixel
    is plotted more than once.
    """
    cx, cy = center.x, center.y
    plot(cx + x, cy + y)
    plot(cx - x, cy + y)
    plot(cx + x, cy - y)
    plot(cx - x, cy - y)
    plot(cx + y, cy + x)
    plot(cx - y, cy + x)
    plot(cx + y, cy - x)
    plot(cx - y, cy - x)


def rasterize_circle(center: Point, radius: int, plot: PlotFn) -> None:
    """Rasterize a circle outline with the midpoint algorithm.

    Walks the octant from (0, radius) toward the diagonal, choosing between a
    horizontal and a diagonal step with an integer decision variable, and
    mirrors each step into the other seven octants.

    Args:
        center: Circle center
        radius: Circle radius, must be >= 0
        plot: Callback invoked with (x, y) for each pixel

    Raises:
        InvalidRadiusError: If radius is negative
    """
    if radius < 0:
        raise InvalidRadiusError(radius)

    x = 0
    y = radius
    p = 1 - radius

    plot_symmetric(center, x, y, plot)

    while x < y:
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * x + 1 - 2 * y
        plot_symmetric(center, x, y, plot)
