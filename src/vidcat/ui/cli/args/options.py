"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CatalogOptions:
    """Catalog locations and persistence switches shared by every subcommand."""

    catalog_path: Path
    report_path: Path
    atomic_writes: bool
    skip_malformed: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    media_path: Path
    save: bool
    options: CatalogOptions


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    media_path: Path
    options: CatalogOptions
    assignments: dict[str, str] = field(default_factory=dict)
    interactive: bool = False
    assume_yes: bool = False


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    options: CatalogOptions


@final
@dataclass(slots=True)
class RenderArgs:
    """Command line arguments for the ``render`` subcommand."""

    command: Literal["render"]
    options: CatalogOptions


CLIArgs = ShowArgs | EditArgs | ListArgs | RenderArgs

__all__ = ["CLIArgs", "CatalogOptions", "EditArgs", "ListArgs", "RenderArgs", "ShowArgs"]
