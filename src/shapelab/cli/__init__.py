"""Command-line interface for shapelab.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Demo scene generation
- Intersection reports with optional outline vertices
- Replay of pointer drag gestures
- Point probing
"""

from shapelab.cli.app import cli, main

__all__ = ["cli", "main"]
