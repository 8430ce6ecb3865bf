"""Command-line interface for rasterlab.

This module provides the CLI using Typer with rich output for
drawing shapes straight into the terminal.

Key features:
- Half-block canvas rendering
- Point listings for inspecting rasterizer output
- Interactive single-key command loop
"""

from rasterlab.cli.app import cli, main

__all__ = ["cli", "main"]
