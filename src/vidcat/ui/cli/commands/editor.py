"""src/vidcat/ui/cli/commands/editor.py
What: Terminal editing surface applying preset assignments and optional field prompts.
Why: Stand in for the player's information dialog when sessions run from the CLI.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from rich.console import Console
from rich.prompt import Confirm, Prompt

from vidcat.features.catalog import FIELD_CATALOG, EditOutcome, MetadataRecord
from vidcat.ui.cli.display.record import RecordDisplay


@final
class PromptEditingSurface:
    """``EditingSurface`` that edits a record in the terminal."""

    def __init__(
        self,
        *,
        assignments: Mapping[str, str] | None = None,
        interactive: bool = False,
        assume_yes: bool = False,
        console: Console | None = None,
        display: RecordDisplay | None = None,
    ) -> None:
        self._assignments = dict(assignments or {})
        self._interactive = interactive
        self._assume_yes = assume_yes
        self._console = console or Console()
        self._display = display or RecordDisplay(self._console)

    def edit(self, record: MetadataRecord) -> EditOutcome:
        """Apply assignments, prompt when interactive, then ask for confirmation."""

        edited = record.with_values(self._assignments)

        if self._interactive:
            changes: dict[str, str] = {}
            for name in FIELD_CATALOG.names():
                current = edited.get(name)
                answer = Prompt.ask(name, default=current, console=self._console)
                if answer != current:
                    changes[name] = answer
            edited = edited.with_values(changes)

        self._display.show_record(edited)

        if self._assume_yes:
            return EditOutcome(record=edited, confirmed=True)

        confirmed = Confirm.ask("Save changes?", default=True, console=self._console)
        return EditOutcome(record=edited, confirmed=confirmed)


__all__ = ["PromptEditingSurface"]
