"""Logging utilities for Rasterlab."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from rasterlab.domain import Point, Triangle

_HANDLER_NAME = "rasterlab"


@dataclass
class RenderStats:
    """Statistics from a drawing session."""

    lines_drawn: int = 0
    circles_drawn: int = 0
    triangles_drawn: int = 0
    pixels_plotted: int = 0
    clears: int = 0
    commands: list[str] = field(default_factory=list)

    @property
    def shapes_drawn(self) -> int:
        """Total number of shapes drawn."""
        return self.lines_drawn + self.circles_drawn + self.triangles_drawn


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces our handlers instead of stacking duplicates
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rasterlab")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for drawing commands that also tracks render statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_command(self, key: str) -> None:
        """Log a dispatched command key."""
        self._logger.debug("Command received", key=key)
        self._stats.commands.append(key)

    def log_line(self, start: Point, end: Point, pixels: int) -> None:
        """Log a rasterized line."""
        self._logger.info(
            "Line drawn",
            start=start.to_tuple(),
            end=end.to_tuple(),
            pixels=pixels,
        )
        self._stats.lines_drawn += 1
        self._stats.pixels_plotted += pixels

    def log_circle(self, center: Point, radius: int, pixels: int) -> None:
        """Log a rasterized circle."""
        self._logger.info(
            "Circle drawn",
            center=center.to_tuple(),
            radius=radius,
            pixels=pixels,
        )
        self._stats.circles_drawn += 1
        self._stats.pixels_plotted += pixels

    def log_triangle(self, triangle: Triangle, pixels: int) -> None:
        """Log a rasterized triangle outline."""
        self._logger.info(
            "Triangle drawn",
            vertices=[p.to_tuple() for p in triangle],
            pixels=pixels,
        )
        self._stats.triangles_drawn += 1
        self._stats.pixels_plotted += pixels

    def log_transform_stage(self, stage: str, triangle: Triangle) -> None:
        """Log the vertices after a transform step."""
        self._logger.debug(
            "Transform applied",
            stage=stage,
            vertices=[p.to_tuple() for p in triangle],
        )

    def log_clear(self) -> None:
        """Log a canvas clear."""
        self._logger.debug("Canvas cleared")
        self._stats.clears += 1

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
