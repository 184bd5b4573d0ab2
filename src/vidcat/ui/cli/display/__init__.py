"""Display management for CLI interface."""

from vidcat.ui.cli.display.record import RecordDisplay

__all__ = ["RecordDisplay"]
