"""Tests for the ``vidcat`` logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from vidcat.platform.logging import (
    LOGGER_NAME,
    CatalogFileFormatter,
    CatalogRichHandler,
    console_level_for,
    setup_logger,
)


@pytest.fixture(autouse=True)
def restore_vidcat_logger() -> Iterator[None]:
    """Put the shared logger back to its import-time shape after each test."""

    yield
    _ = setup_logger()


def _quiet_console() -> Console:
    return Console(file=StringIO(), soft_wrap=True)


class TestConsoleLevelFor:
    """Mapping of the CLI verbosity switches."""

    @pytest.mark.parametrize(
        ("verbose", "quiet", "expected"),
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose: bool, quiet: bool, expected: int) -> None:
        assert console_level_for(verbose=verbose, quiet=quiet) == expected


class TestSetupLogger:
    """Handler wiring for the shared logger."""

    def test_console_only_without_log_file(self) -> None:
        app_logger = setup_logger(console=_quiet_console())

        assert app_logger.name == LOGGER_NAME
        assert [type(handler) for handler in app_logger.handlers] == [CatalogRichHandler]

    def test_log_file_gets_rotating_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "vidcat.log"

        app_logger = setup_logger(log_file=log_file, console=_quiet_console())

        file_handlers = [
            handler
            for handler in app_logger.handlers
            if isinstance(handler, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert isinstance(file_handlers[0].formatter, CatalogFileFormatter)
        assert log_file.parent.is_dir()

    def test_reconfiguring_replaces_handlers(self, tmp_path: Path) -> None:
        """Calling setup twice never stacks duplicate handlers."""

        _ = setup_logger(log_file=tmp_path / "first.log", console=_quiet_console())
        app_logger = setup_logger(console_level=logging.ERROR, console=_quiet_console())

        assert len(app_logger.handlers) == 1
        assert app_logger.handlers[0].level == logging.ERROR

    def test_console_level_filters_console_only(self, tmp_path: Path) -> None:
        """Quiet consoles still leave debug detail in the log file."""

        buffer = StringIO()
        log_file = tmp_path / "vidcat.log"
        app_logger = setup_logger(
            log_file=log_file,
            console_level=logging.ERROR,
            console=Console(file=buffer, soft_wrap=True),
        )

        app_logger.debug("Loaded 2 records")
        for handler in app_logger.handlers:
            handler.flush()

        assert "Loaded 2 records" not in buffer.getvalue()
        assert "Loaded 2 records" in log_file.read_text(encoding="utf-8")


class TestCatalogFileFormatter:
    """Plain-text lines written to the log file."""

    @staticmethod
    def _record(**extras: object) -> logging.LogRecord:
        record = logging.LogRecord(
            name=LOGGER_NAME,
            level=logging.INFO,
            pathname="test",
            lineno=0,
            msg="Saved %d records",
            args=(3,),
            exc_info=None,
        )
        for key, value in extras.items():
            setattr(record, key, value)
        return record

    def test_event_and_path_are_appended(self) -> None:
        line = CatalogFileFormatter().format(
            self._record(catalog_event="catalog.store.saved", path=Path("/data/catalog.txt"))
        )

        assert line.endswith("INFO - Saved 3 records [catalog.store.saved path=/data/catalog.txt]")

    def test_event_without_path(self) -> None:
        line = CatalogFileFormatter().format(self._record(catalog_event="catalog.session.saved"))

        assert line.endswith("Saved 3 records [catalog.session.saved]")

    def test_plain_records_are_untouched(self) -> None:
        line = CatalogFileFormatter().format(self._record())

        assert line.endswith("vidcat - INFO - Saved 3 records")
