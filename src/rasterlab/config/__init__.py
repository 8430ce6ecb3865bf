"""Configuration management for rasterlab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Pixel surface settings
- DemoConfig: Shapes drawn by the interactive commands
- PaletteConfig: Colors per shape
- LoggingConfig: Logging settings
- RasterLabSettings: Main application settings
"""

from rasterlab.config.settings import (
    CanvasConfig,
    DemoConfig,
    LoggingConfig,
    PaletteConfig,
    RasterLabSettings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "DemoConfig",
    "LoggingConfig",
    "PaletteConfig",
    "RasterLabSettings",
    "get_default_settings",
]
