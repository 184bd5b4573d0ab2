"""src/vidcat/ui/cli/commands/edit.py
What: Edit and persist the catalog entry for one media file.
Why: Run a full review session (open, edit, confirm or cancel) from the terminal.
"""

from __future__ import annotations

from typing import final

from typing_extensions import override

from vidcat.features.catalog import EditingSurface, SessionResult
from vidcat.ui.cli.args.options import EditArgs
from vidcat.ui.cli.commands.editor import PromptEditingSurface
from vidcat.ui.cli.commands.executor import MediaCommandExecutor, ProviderFactory
from vidcat.ui.cli.display.record import RecordDisplay


@final
class EditCommand(MediaCommandExecutor):
    """Drive a review session through a terminal editing surface."""

    def __init__(
        self,
        args: EditArgs,
        *,
        provider_factory: ProviderFactory | None = None,
        surface: EditingSurface | None = None,
        display: RecordDisplay | None = None,
    ) -> None:
        super().__init__(
            args.options,
            args.media_path,
            provider_factory=provider_factory,
            display=display,
        )
        self.args = args
        self.surface: EditingSurface = surface or PromptEditingSurface(
            assignments=args.assignments,
            interactive=args.interactive,
            assume_yes=args.assume_yes,
            console=self.display.console,
            display=self.display,
        )

    @override
    def execute(self) -> SessionResult | None:
        session = self.create_media_session()
        result = session.run(self.surface)
        if result is None:
            if not self.options.quiet:
                self.display.console.print("[yellow]No changes saved.[/yellow]")
            return None

        self.display.show_saved(result, quiet=self.options.quiet)
        return result
