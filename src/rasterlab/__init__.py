"""Rasterlab - Classic raster graphics algorithms on an integer pixel grid.

Rasterlab draws lines with Bresenham's algorithm, circles with the midpoint
algorithm, and applies translation, rotation and reflection to triangles before
rasterizing them. The algorithms only ever call a plot callback, so they can be
pointed at the bundled terminal canvas or at any other pixel surface.

Example:
    $ rasterlab line 10 12 26 22

This will draw the line on a 64x64 canvas and render it in the terminal.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
