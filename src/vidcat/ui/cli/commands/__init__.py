"""Command execution package for CLI."""

from vidcat.ui.cli.commands.catalog import ListCommand, RenderCommand
from vidcat.ui.cli.commands.edit import EditCommand
from vidcat.ui.cli.commands.editor import PromptEditingSurface
from vidcat.ui.cli.commands.executor import CommandExecutor, MediaCommandExecutor
from vidcat.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "EditCommand",
    "ListCommand",
    "MediaCommandExecutor",
    "PromptEditingSurface",
    "RenderCommand",
    "ShowCommand",
]
