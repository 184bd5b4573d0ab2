"""src/vidcat/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse session construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any

from vidcat.features.catalog import (
    LiveMetadataProvider,
    MutagenMetadataProvider,
    ReviewSession,
)
from vidcat.ui.cli.args.options import CatalogOptions
from vidcat.ui.cli.display.record import RecordDisplay

ProviderFactory = Callable[[Path], LiveMetadataProvider]


class CommandExecutor(ABC):
    """Base class for command execution."""

    options: CatalogOptions
    display: RecordDisplay

    def __init__(self, options: CatalogOptions, *, display: RecordDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            options: Catalog locations and persistence switches.
            display: Presenter used for console output.
        """
        self.options = options
        self.display = display or RecordDisplay()

    def create_session(self, provider: LiveMetadataProvider) -> ReviewSession:
        """Build a review session bound to the configured catalog and report."""

        return ReviewSession(
            provider,
            self.options.catalog_path,
            self.options.report_path,
            atomic_writes=self.options.atomic_writes,
            skip_malformed=self.options.skip_malformed,
        )

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command."""
        pass


class MediaCommandExecutor(CommandExecutor, ABC):
    """Executor for commands that open a session on a media file."""

    def __init__(
        self,
        options: CatalogOptions,
        media_path: Path,
        *,
        provider_factory: ProviderFactory | None = None,
        display: RecordDisplay | None = None,
    ) -> None:
        super().__init__(options, display=display)
        self.media_path = media_path
        self.provider_factory: ProviderFactory = provider_factory or MutagenMetadataProvider

    def create_media_session(self) -> ReviewSession:
        return self.create_session(self.provider_factory(self.media_path))
