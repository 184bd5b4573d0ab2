"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from vidcat.config.config import Config
from vidcat.features.catalog import FIELD_CATALOG
from vidcat.platform.logging import DEFAULT_LOG_FILE, console_level_for, logger, setup_logger
from vidcat.ui.cli.args.options import (
    CLIArgs,
    CatalogOptions,
    EditArgs,
    ListArgs,
    RenderArgs,
    ShowArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        ArgumentParser._configure_common_options(common)

        parser = argparse.ArgumentParser(
            description="vidcat - Keep a flat-text catalog of video metadata and an HTML report of it.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser(
            "show",
            parents=[common],
            help="Show the catalog entry (or live metadata) for a media file",
        )
        _ = show_parser.add_argument(
            "media_path",
            type=str,
            help="Media file whose title is looked up",
            metavar="MEDIA_PATH",
        )
        _ = show_parser.add_argument(
            "--save",
            action="store_true",
            help="Store the shown record and regenerate the report",
        )

        edit_parser = subparsers.add_parser(
            "edit",
            parents=[common],
            help="Edit the catalog entry for a media file",
        )
        _ = edit_parser.add_argument(
            "media_path",
            type=str,
            help="Media file whose title is looked up",
            metavar="MEDIA_PATH",
        )
        _ = edit_parser.add_argument(
            "--set",
            dest="assignments",
            action="append",
            default=[],
            metavar="FIELD=VALUE",
            help=f"Set a field before confirming (fields: {', '.join(FIELD_CATALOG.names())})",
        )
        _ = edit_parser.add_argument(
            "--interactive",
            action="store_true",
            help="Prompt for every field",
        )
        _ = edit_parser.add_argument(
            "--yes",
            dest="assume_yes",
            action="store_true",
            help="Save without asking for confirmation",
        )

        _ = subparsers.add_parser(
            "list",
            parents=[common],
            help="Print every catalog entry",
        )

        _ = subparsers.add_parser(
            "render",
            parents=[common],
            help="Regenerate the HTML report from the catalog",
        )

        return parser

    @staticmethod
    def _configure_common_options(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "--catalog",
            type=str,
            help="Catalog file (defaults to the configured or portable location)",
            metavar="CATALOG_PATH",
        )
        _ = parser.add_argument(
            "--report",
            type=str,
            help="HTML report file (defaults to the configured or portable location)",
            metavar="REPORT_PATH",
        )
        _ = parser.add_argument(
            "--atomic",
            action="store_true",
            help="Write the catalog through a temporary file and rename it into place",
        )
        _ = parser.add_argument(
            "--skip-malformed",
            action="store_true",
            help="Ignore malformed catalog records instead of refusing the catalog",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the media path does not exist or an assignment is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = console_level_for(
            verbose=bool(getattr(parsed_args, "verbose", False)),
            quiet=bool(getattr(parsed_args, "quiet", False)),
        )

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        options = ArgumentParser._build_options(parsed_args, configuration)
        command: str = parsed_args.command

        if command == "show":
            return ShowArgs(
                command="show",
                media_path=ArgumentParser._require_media(parsed_args.media_path),
                save=parsed_args.save,
                options=options,
            )

        if command == "edit":
            return EditArgs(
                command="edit",
                media_path=ArgumentParser._require_media(parsed_args.media_path),
                options=options,
                assignments=ArgumentParser._parse_assignments(parsed_args.assignments),
                interactive=parsed_args.interactive,
                assume_yes=parsed_args.assume_yes,
            )

        if command == "list":
            return ListArgs(command="list", options=options)

        if command == "render":
            return RenderArgs(command="render", options=options)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _build_options(parsed_args: argparse.Namespace, configuration: Config) -> CatalogOptions:
        catalog_path = (
            Path(parsed_args.catalog).expanduser().resolve()
            if parsed_args.catalog
            else configuration.resolved_catalog_file
        )
        report_path = (
            Path(parsed_args.report).expanduser().resolve()
            if parsed_args.report
            else configuration.resolved_report_file
        )
        return CatalogOptions(
            catalog_path=catalog_path,
            report_path=report_path,
            atomic_writes=bool(parsed_args.atomic) or configuration.atomic_writes,
            skip_malformed=bool(parsed_args.skip_malformed) or configuration.skip_malformed_records,
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
        )

    @staticmethod
    def _require_media(raw_path: str) -> Path:
        media_path = Path(raw_path)
        if not media_path.is_file():
            logger.error("Media file does not exist: %s", media_path)
            sys.exit(1)
        return media_path

    @staticmethod
    def _parse_assignments(raw_assignments: Sequence[str]) -> dict[str, str]:
        """Turn ``FIELD=VALUE`` strings into a field mapping."""

        assignments: dict[str, str] = {}
        for raw in raw_assignments:
            name, separator, value = raw.partition("=")
            name = name.strip()
            if not separator:
                logger.error("Expected FIELD=VALUE, got: %s", raw)
                sys.exit(1)
            if name not in FIELD_CATALOG.names():
                logger.error(
                    "Unknown field '%s'. Valid fields: %s",
                    name,
                    ", ".join(FIELD_CATALOG.names()),
                )
                sys.exit(1)
            assignments[name] = value
        return assignments
