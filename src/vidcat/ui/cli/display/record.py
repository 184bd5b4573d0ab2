"""src/vidcat/ui/cli/display/record.py
What: Render catalog records, whole catalogs and save outcomes for the terminal.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from vidcat.features.catalog import (
    FIELD_CATALOG,
    NULL_SENTINEL,
    MetadataRecord,
    RecordStore,
    SessionResult,
)


@final
class RecordDisplay:
    """Handles record and catalog display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def build_record_table(self, record: MetadataRecord, *, source: str | None = None) -> Table:
        """Two-column Attribute/Value table for one record."""

        caption = f"seeded from {source}" if source else None
        table = Table(
            title="Video information",
            caption=caption,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Attribute", style="bold")
        table.add_column("Value")

        for name, value in zip(FIELD_CATALOG.names(), record, strict=True):
            table.add_row(name, self._format_value(value))
        return table

    def build_catalog_table(self, store: RecordStore) -> Table:
        """One row per record, one column per catalog field."""

        table = Table(
            title=f"Catalog ({len(store)} titles)",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
            highlight=True,
        )
        for name in FIELD_CATALOG.names():
            table.add_column(name, style="bold" if name == FIELD_CATALOG.key_name else None)

        for record in store:
            table.add_row(*(self._format_value(value) for value in record))
        return table

    def show_record(self, record: MetadataRecord, *, source: str | None = None) -> None:
        self.console.print(self.build_record_table(record, source=source))

    def show_catalog(self, store: RecordStore) -> None:
        if len(store) == 0:
            self.console.print("[yellow]The catalog is empty.[/yellow]")
            return
        self.console.print(self.build_catalog_table(store))

    def show_saved(self, result: SessionResult, *, quiet: bool = False) -> None:
        """Summarise where a confirmed session was written."""

        if quiet:
            return
        self.console.print(f"[green]Saved '{result.record.key}'[/green]")
        self.console.print(f"Catalog: {result.catalog_path} ({len(result.store)} titles)")
        self.console.print(f"Report: {result.report_path}")

    @staticmethod
    def _format_value(value: str) -> Text:
        if value == NULL_SENTINEL:
            return Text(value, style="dim")
        if not value:
            return Text("N/A", style="dim")
        return Text(value)


__all__ = ["RecordDisplay"]
