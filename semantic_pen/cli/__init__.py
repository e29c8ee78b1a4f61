"""Command-line tool for semantic_pen."""

from semantic_pen.cli.app import main

__all__ = ["main"]
