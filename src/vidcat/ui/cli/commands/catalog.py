"""src/vidcat/ui/cli/commands/catalog.py
What: Commands that operate on the whole catalog without a media file.
Why: Inspect the catalog and rebuild the report outside a review session.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from typing_extensions import override

from vidcat.features.catalog import CatalogRenderer, RecordStore
from vidcat.ui.cli.args.options import ListArgs, RenderArgs
from vidcat.ui.cli.commands.executor import CommandExecutor
from vidcat.ui.cli.display.record import RecordDisplay


@final
class ListCommand(CommandExecutor):
    """Print every catalog entry in a table."""

    def __init__(self, args: ListArgs, *, display: RecordDisplay | None = None) -> None:
        super().__init__(args.options, display=display)

    @override
    def execute(self) -> RecordStore:
        store = RecordStore.load(
            self.options.catalog_path,
            skip_malformed=self.options.skip_malformed,
        )
        self.display.show_catalog(store)
        return store


@final
class RenderCommand(CommandExecutor):
    """Regenerate the HTML report from the current catalog."""

    def __init__(
        self,
        args: RenderArgs,
        *,
        renderer: CatalogRenderer | None = None,
        display: RecordDisplay | None = None,
    ) -> None:
        super().__init__(args.options, display=display)
        self.renderer = renderer or CatalogRenderer()

    @override
    def execute(self) -> Path:
        store = RecordStore.load(
            self.options.catalog_path,
            skip_malformed=self.options.skip_malformed,
        )
        report_path = self.renderer.write_report(self.options.report_path, store)
        if not self.options.quiet:
            self.display.console.print(
                f"[green]Report for {len(store)} titles written to {report_path}[/green]"
            )
        return report_path
