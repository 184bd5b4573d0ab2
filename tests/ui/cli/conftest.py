"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from vidcat.ui.cli.args.options import CatalogOptions
from vidcat.ui.cli.display.record import RecordDisplay


@pytest.fixture
def console() -> Console:
    """Wide, colourless console writing into memory."""

    return Console(file=StringIO(), width=240, color_system=None)


@pytest.fixture
def display(console: Console) -> RecordDisplay:
    return RecordDisplay(console)


@pytest.fixture
def options(tmp_path: Path) -> CatalogOptions:
    return CatalogOptions(
        catalog_path=tmp_path / "catalog.txt",
        report_path=tmp_path / "index.html",
        atomic_writes=False,
        skip_malformed=False,
        verbose=False,
        quiet=False,
    )


@pytest.fixture
def output(console: Console) -> Callable[[], str]:
    """Return a reader for everything printed to the in-memory console."""

    def _read() -> str:
        file = console.file
        assert isinstance(file, StringIO)
        return file.getvalue()

    return _read
