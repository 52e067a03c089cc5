"""Command-line interface for pathgraph.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Per-path summary tables for documents
- Progress bars for document normalization
- Point containment queries
- Verbose/quiet output modes
"""

from pathgraph.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
