"""Logger bootstrap for vidcat.

Where: platform/logging/config.py
What: Build the ``vidcat`` logger: styled catalog events on stderr, a tagged plain-text trail on disk.
Why: One call from the CLI turns verbosity flags and the configured log file into handlers.

Importing this module only attaches the console handler. The log file is
opened once the CLI calls ``setup_logger`` with the configured location, so
library use and tests never create ``logs/`` as a side effect.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from typing_extensions import override

from rich.console import Console

from vidcat.config.paths import default_log_file

from .handlers import CatalogRichHandler

LOGGER_NAME: Final[str] = "vidcat"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT: Final[int] = 5


class CatalogFileFormatter(logging.Formatter):
    """Plain formatter that appends the catalog event tag and its path.

    ``2024-05-01 10:00:00,000 - vidcat - INFO - Saved 3 records to x [catalog.store.saved path=x]``
    keeps file logs greppable by event name without Rich markup.
    """

    def __init__(self) -> None:
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @override
    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        event = getattr(record, "catalog_event", None)
        if not isinstance(event, str):
            return line

        tag = [event]
        path = getattr(record, "path", None)
        if path is not None:
            tag.append(f"path={path}")
        return f"{line} [{' '.join(tag)}]"


def console_level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity switches to a console level; ``quiet`` wins."""

    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _open_log_file(log_file: Path, level: int) -> logging.Handler:
    resolved = log_file.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(CatalogFileFormatter())
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """(Re)configure the shared ``vidcat`` logger.

    Existing handlers are closed and replaced, so calling this again with
    different levels or another log file is safe.

    Args:
        log_file: Rotating log destination; ``None`` logs to the console only.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the log file.
        console: Console to render on; defaults to stderr so stdout stays
            free for command output.

    Returns:
        logging.Logger: The configured ``vidcat`` logger.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)

    console_handler = CatalogRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        app_logger.addHandler(_open_log_file(Path(log_file), file_level))

    return app_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "CatalogFileFormatter",
    "console_level_for",
    "logger",
    "setup_logger",
]
