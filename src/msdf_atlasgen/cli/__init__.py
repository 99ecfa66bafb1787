"""Command-line interface for msdf-atlasgen.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font summary before generation
- Atlas, metrics and sample glyph report
- Verbose/quiet output modes
- Detailed error reporting
"""

from msdf_atlasgen.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
