"""Command-line interface for glyphbold.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render text to a PNG with adjustable boldness and vertex sampling
- Contour listing mode for inspecting solid/hole classification
- Verbose/quiet output modes
"""

from glyphbold.cli.app import cli, main

__all__ = ["cli", "main"]
