"""Exception hierarchy for Rasterlab."""


class RasterLabError(Exception):
    """Base exception for all Rasterlab errors."""

    pass


class GeometryError(RasterLabError):
    """Errors in geometric input."""

    pass


class InvalidRadiusError(GeometryError):
    """Circle radius outside the supported domain."""

    def __init__(self, radius: int) -> None:
        self.radius = radius
        super().__init__(f"Circle radius must be non-negative, got {radius}")


class ColorError(RasterLabError):
    """Invalid color channel or unknown color name."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CanvasError(RasterLabError):
    """Invalid canvas dimensions or configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CommandError(RasterLabError):
    """Errors related to interactive command dispatch."""

    pass


class UnknownCommandError(CommandError):
    """Key does not map to any command."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown command '{key}'")
