"""Command-line interface for glyphgrid.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- PNG previews with padding, colors and stroke outlines
- Text measuring, wrapping and draw-call listings
- Glyph override editing with minimal settings export
"""

from glyphgrid.cli.app import cli, main

__all__ = ["cli", "main"]
