"""src/vidcat/ui/cli/commands/show.py
What: Display the catalog entry or live metadata for one media file.
Why: Mirror the player's information view, with an option to store what is shown.
"""

from __future__ import annotations

from typing import final

from typing_extensions import override

from vidcat.features.catalog import SessionResult
from vidcat.ui.cli.args.options import ShowArgs
from vidcat.ui.cli.commands.executor import MediaCommandExecutor, ProviderFactory
from vidcat.ui.cli.display.record import RecordDisplay


@final
class ShowCommand(MediaCommandExecutor):
    """Open a session, print the seeded record, then save or close it."""

    def __init__(
        self,
        args: ShowArgs,
        *,
        provider_factory: ProviderFactory | None = None,
        display: RecordDisplay | None = None,
    ) -> None:
        super().__init__(
            args.options,
            args.media_path,
            provider_factory=provider_factory,
            display=display,
        )
        self.args = args

    @override
    def execute(self) -> SessionResult | None:
        """Show the record; persist it unchanged when ``--save`` was given."""

        session = self.create_media_session()
        record = session.open()
        self.display.show_record(record, source=session.seed_source)

        if not self.args.save:
            session.cancel()
            return None

        result = session.confirm(record)
        self.display.show_saved(result, quiet=self.options.quiet)
        return result
