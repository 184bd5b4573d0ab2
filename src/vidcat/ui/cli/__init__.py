"""Command line interface package."""

from vidcat.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
