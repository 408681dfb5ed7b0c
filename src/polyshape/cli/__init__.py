"""Command-line interface for polyshape.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for shape rendering
- Bounds table for layout checks
- Verbose/quiet output modes
- Dry-run mode
"""

from polyshape.cli.app import cli, main

__all__ = ["cli", "main"]
