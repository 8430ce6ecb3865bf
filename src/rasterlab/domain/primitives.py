"""Value types for model-space geometry.

This module defines the fundamental types shared by the rasterizers and the
presentation layer:
- Point: An integer 2D point in model space (Y axis pointing up)
- Color: An RGBA color with 8-bit channels
- Triangle: Three points forming a triangle outline
"""

import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from rasterlab.exceptions import ColorError


@dataclass(frozen=True, slots=True)
class Point:
    """A point on the integer grid in model space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate, increasing to the right
        y: Y coordinate, increasing upward
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=int(data["x"]), y=int(data["y"]))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with 8-bit channels.

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
        a: Alpha channel [0, 255], 255 is opaque
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ColorError(f"Color channel '{name}' out of range [0, 255]: {value}")

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to (r, g, b) tuple, dropping alpha."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Format as #rrggbb (alpha is not included)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse #rrggbb or #rrggbbaa.

        Raises:
            ColorError: If the string is not a valid hex color
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) not in (6, 8) or not all(ch in string.hexdigits for ch in digits):
            raise ColorError(f"Invalid hex color: {value!r}")
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three points forming a triangle outline.

    Triangles are transient shape inputs: transforms return new instances
    instead of mutating vertices.
    """

    a: Point
    b: Point
    c: Point

    def vertices(self) -> tuple[Point, Point, Point]:
        """Return vertices in drawing order."""
        return (self.a, self.b, self.c)

    def map(self, fn: Callable[[Point], Point]) -> "Triangle":
        """Apply a point function to each vertex.

        Args:
            fn: Function mapping a Point to a new Point

        Returns:
            New Triangle with transformed vertices
        """
        return Triangle(fn(self.a), fn(self.b), fn(self.c))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices())

    def __str__(self) -> str:
        return f"A{self.a} B{self.b} C{self.c}"
