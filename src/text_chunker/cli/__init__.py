"""
text-chunker CLI Package.

This package contains the command-line interface for splitting files and
comparing splitter configurations.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
