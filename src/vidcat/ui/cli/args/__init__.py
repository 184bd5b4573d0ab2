"""Command line argument handling package."""

from vidcat.ui.cli.args.parser import ArgumentParser
from vidcat.ui.cli.args.options import (
    CLIArgs,
    CatalogOptions,
    EditArgs,
    ListArgs,
    RenderArgs,
    ShowArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CatalogOptions",
    "EditArgs",
    "ListArgs",
    "RenderArgs",
    "ShowArgs",
]
