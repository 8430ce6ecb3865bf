"""Presentation layer for rasterlab.

Owns everything the core algorithms deliberately ignore: the pixel surface,
the model-to-device mapping and command dispatch.

Key classes:
- Canvas: RGBA pixel buffer with origin offset and Y flip
- Session: Single-key command dispatcher
- TransformReport: Triangle vertices after each transform step
"""

from rasterlab.render.canvas import Canvas
from rasterlab.render.session import Session, TransformReport

__all__ = [
    "Canvas",
    "Session",
    "TransformReport",
]
