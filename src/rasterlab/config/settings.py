"""Configuration settings for Rasterlab."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from rasterlab.domain import Color, Point, Triangle, color_by_name
from rasterlab.exceptions import ColorError


def _check_color_name(value: str) -> str:
    try:
        color_by_name(value)
    except ColorError as e:
        raise ValueError(str(e)) from e
    return value


class CanvasConfig(BaseModel):
    """Configuration for the pixel surface.

    The origin of model space sits at (width // 2, height // 2) in device
    coordinates.
    """

    width: int = Field(
        default=64,
        ge=1,
        le=4096,
        description="Canvas width in device pixels",
    )
    height: int = Field(
        default=64,
        ge=1,
        le=4096,
        description="Canvas height in device pixels",
    )
    pixel_size: int = Field(
        default=1,
        ge=1,
        le=16,
        description="Side of the square block written for each plotted point",
    )
    background: str = Field(
        default="background",
        description="Palette name or hex code for the background",
    )
    axis: str = Field(
        default="axis",
        description="Palette name or hex code for the axes",
    )

    @field_validator("background", "axis")
    @classmethod
    def validate_color(cls, value: str) -> str:
        """Reject names missing from the palette."""
        return _check_color_name(value)

    def background_color(self) -> Color:
        """Resolve the background color."""
        return color_by_name(self.background)

    def axis_color(self) -> Color:
        """Resolve the axis color."""
        return color_by_name(self.axis)


class DemoConfig(BaseModel):
    """Shapes drawn by the interactive commands."""

    line_start: tuple[int, int] = Field(
        default=(10, 12),
        description="Start point of the demo line",
    )
    line_end: tuple[int, int] = Field(
        default=(26, 22),
        description="End point of the demo line",
    )
    circle_center: tuple[int, int] = Field(
        default=(-3, -3),
        description="Center of the demo circle",
    )
    circle_radius: int = Field(
        default=8,
        ge=0,
        description="Radius of the demo circle",
    )
    triangle: tuple[tuple[int, int], tuple[int, int], tuple[int, int]] = Field(
        default=((0, 0), (1, 1), (5, 2)),
        description="Vertices A, B, C of the demo triangle",
    )
    translation: tuple[int, int] = Field(
        default=(5, 1),
        description="Offset applied in the translation step",
    )
    rotation_degrees: float = Field(
        default=90.0,
        description="Counter-clockwise angle applied in the rotation step",
    )

    def line_points(self) -> tuple[Point, Point]:
        """Get the demo line endpoints."""
        return Point(*self.line_start), Point(*self.line_end)

    def circle_point(self) -> Point:
        """Get the demo circle center."""
        return Point(*self.circle_center)

    def triangle_shape(self) -> Triangle:
        """Get the demo triangle."""
        a, b, c = self.triangle
        return Triangle(Point(*a), Point(*b), Point(*c))


class PaletteConfig(BaseModel):
    """Colors used for each demo shape."""

    line: str = Field(default="green", description="Line color")
    circle: str = Field(default="yellow", description="Circle color")
    triangle_initial: str = Field(default="blue", description="Triangle before transforms")
    triangle_final: str = Field(default="red", description="Triangle after transforms")

    @field_validator("line", "circle", "triangle_initial", "triangle_final")
    @classmethod
    def validate_color(cls, value: str) -> str:
        """Reject names missing from the palette."""
        return _check_color_name(value)

    def resolve(self, role: str) -> Color:
        """Resolve the color assigned to a role (e.g. "line")."""
        return color_by_name(getattr(self, role))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterLabSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterLabSettings:
    """Get default application settings."""
    return RasterLabSettings()
