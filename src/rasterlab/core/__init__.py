"""Core algorithms for rasterlab.

This module contains the pure algorithms:

- Geometry transforms (translate, rotate, reflect)
- Line rasterization (Bresenham)
- Circle rasterization (midpoint, 8-way symmetry)
- Triangle composition from three lines

All functions are:
- Stateless (safe to call from several threads with distinct callbacks)
- Integer-only on the rasterization side
- Backend agnostic, reporting pixels through a plot callback

Key functions:
- rasterize_line: Plot a line segment
- rasterize_circle: Plot a circle outline
- draw_triangle: Plot a triangle outline
- translate / rotate / reflect_across_y_axis: Point transforms
- collect_line / collect_circle / collect_triangle: Record plotted points
"""

from rasterlab.core.geometry import (
    reflect_across_y_axis,
    rotate,
    round_half_away_from_zero,
    translate,
)
from rasterlab.core.raster import (
    PlotFn,
    plot_symmetric,
    rasterize_circle,
    rasterize_line,
)
from rasterlab.core.shapes import (
    collect_circle,
    collect_line,
    collect_triangle,
    draw_triangle,
)

__all__ = [
    "PlotFn",
    "collect_circle",
    "collect_line",
    "collect_triangle",
    "draw_triangle",
    "plot_symmetric",
    "rasterize_circle",
    "rasterize_line",
    "reflect_across_y_axis",
    "rotate",
    "round_half_away_from_zero",
    "translate",
]
