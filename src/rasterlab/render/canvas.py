"""RGBA pixel surface with model-to-device coordinate mapping."""

from collections.abc import Iterator

from rasterlab.core import PlotFn
from rasterlab.domain import Color
from rasterlab.domain.palette import AXIS, BACKGROUND
from rasterlab.exceptions import CanvasError


class Canvas:
    """RGBA pixel buffer that owns the model-to-device mapping.

    Pixels are stored as a flat bytearray in RGBA order, row-major: device
    pixel (x, y) is at index (y * width + x) * 4.

    Model space has its origin at (width // 2, height // 2) and Y pointing
    up; device space has its origin at the top-left corner and Y pointing
    down.
    """

    def __init__(
        self,
        width: int = 64,
        height: int = 64,
        pixel_size: int = 1,
        background: Color = BACKGROUND,
        axis_color: Color = AXIS,
    ) -> None:
        if width < 1 or height < 1:
            raise CanvasError(f"Canvas size must be positive, got {width}x{height}")
        if pixel_size < 1:
            raise CanvasError(f"Pixel size must be positive, got {pixel_size}")

        self.width = width
        self.height = height
        self.pixel_size = pixel_size
        self.background = background
        self.axis_color = axis_color
        self.origin_x = width // 2
        self.origin_y = height // 2
        self.buffer = bytearray(width * height * 4)
        self.clear()

    def to_device(self, x: int, y: int) -> tuple[int, int]:
        """Map model coordinates to device coordinates (flips Y)."""
        return self.origin_x + x, self.origin_y - y

    def set(self, dx: int, dy: int, color: Color) -> None:
        """Set a single device pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= dx < self.width and 0 <= dy < self.height:
            idx = (dy * self.width + dx) * 4
            self.buffer[idx : idx + 4] = bytes(color.to_tuple())

    def get(self, dx: int, dy: int) -> Color:
        """Get a device pixel's color.

        Raises:
            CanvasError: If (dx, dy) is outside the surface
        """
        if not (0 <= dx < self.width and 0 <= dy < self.height):
            raise CanvasError(f"Pixel ({dx},{dy}) outside {self.width}x{self.height} canvas")
        idx = (dy * self.width + dx) * 4
        return Color(*self.buffer[idx : idx + 4])

    def pixel_at(self, x: int, y: int) -> Color:
        """Get the color at a model-space coordinate."""
        return self.get(*self.to_device(x, y))

    def plot(self, x: int, y: int, color: Color) -> None:
        """Plot a model-space point as a pixel_size square block."""
        sx, sy = self.to_device(x, y)
        half = self.pixel_size // 2
        for row in range(sy - half, sy - half + self.pixel_size):
            for col in range(sx - half, sx - half + self.pixel_size):
                self.set(col, row, color)

    def plotter(self, color: Color) -> PlotFn:
        """Bind a color and return a plot callback for the rasterizers."""

        def plot(x: int, y: int) -> None:
            self.plot(x, y, color)

        return plot

    def fill(self, color: Color) -> None:
        """Fill the entire surface with a color."""
        self.buffer[:] = bytes(color.to_tuple()) * (self.width * self.height)

    def clear(self) -> None:
        """Fill with the background color and draw the axes through the origin."""
        self.fill(self.background)
        for dx in range(self.width):
            self.set(dx, self.origin_y, self.axis_color)
        for dy in range(self.height):
            self.set(self.origin_x, dy, self.axis_color)

    def rows(self) -> Iterator[list[Color]]:
        """Iterate device rows from top to bottom."""
        for dy in range(self.height):
            yield [self.get(dx, dy) for dx in range(self.width)]

    def count(self, color: Color) -> int:
        """Count device pixels with exactly this color."""
        needle = bytes(color.to_tuple())
        return sum(
            1
            for idx in range(0, len(self.buffer), 4)
            if self.buffer[idx : idx + 4] == needle
        )
