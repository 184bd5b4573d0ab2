"""Command line interface for vidcat."""

import sys
from typing import final

from vidcat.features.catalog import CatalogError
from vidcat.platform.logging import logger
from vidcat.ui.cli.args import ArgumentParser
from vidcat.ui.cli.args.options import CLIArgs, EditArgs, ListArgs, RenderArgs, ShowArgs
from vidcat.ui.cli.commands import EditCommand, ListCommand, RenderCommand, ShowCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ShowArgs):
                _ = ShowCommand(args).execute()
            elif isinstance(args, EditArgs):
                _ = EditCommand(args).execute()
            elif isinstance(args, ListArgs):
                _ = ListCommand(args).execute()
            else:
                assert isinstance(args, RenderArgs)
                _ = RenderCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except CatalogError as e:
            logger.error(
                "%s",
                e,
                extra={"catalog_event": "catalog.error", "error_message": str(e)},
            )
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
