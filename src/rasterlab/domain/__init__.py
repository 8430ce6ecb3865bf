"""Domain models for rasterlab.

This module contains the value types that flow between the rasterizers,
the transforms and the presentation layer. All models are:

- Immutable (frozen dataclasses)
- Integer based, matching the pixel grid
- Independent of any rendering backend

Key classes:
- Point: An integer point in model space
- Color: An RGBA color
- Triangle: Three points forming an outline
"""

from rasterlab.domain.palette import NAMED_COLORS, color_by_name
from rasterlab.domain.primitives import Color, Point, Triangle

__all__: list[str] = [
    # Core types
    "Point",
    "Color",
    "Triangle",
    # Palette
    "NAMED_COLORS",
    "color_by_name",
]
