"""Command-line interface for atlascpp.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Atlas layout summary before export
- Optional font files to take vertical metrics from
- Verbose/quiet output modes
- Detailed error reporting
"""

from atlascpp.cli.app import cli, main

__all__ = ["cli", "main"]
