"""Command-line interface for curveclip.

This module provides the CLI using Typer with rich output.

Key features:
- Build outlines from JSON segment documents
- Print SVG path data or JSON commands, or write SVG files
- Inspect fitted control points
"""

from curveclip.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
