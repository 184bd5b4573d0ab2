"""Tests for the ``CatalogRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from vidcat.platform.logging import CatalogRichHandler


def _make_handler() -> CatalogRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return CatalogRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with catalog extras for testing."""

    record = logging.LogRecord(
        name="vidcat",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="fallback message",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_formats_saved_session() -> None:
    """Session events show the label, the quoted title and the details."""

    handler = _make_handler()
    record = _build_record(catalog_event="catalog.session.saved", title="Inception", records=3)

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain == "✅ Session saved 'Inception' [records=3]"


def test_render_message_truncates_long_paths() -> None:
    """Deep paths keep their last four segments behind an ellipsis."""

    handler = _make_handler()
    record = _build_record(
        catalog_event="catalog.store.loaded",
        records=12,
        path="/home/user/videos/library/2024/catalog.txt",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("[records=12] @ …/videos/library/2024/catalog.txt")


def test_render_message_keeps_short_paths_absolute() -> None:
    handler = _make_handler()
    record = _build_record(catalog_event="catalog.report.written", path="/data/index.html")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("Report written @ /data/index.html")


def test_render_message_handles_windows_paths() -> None:
    handler = _make_handler()
    record = _build_record(catalog_event="catalog.store.saved", path="C:\\Users\\me\\catalog.txt")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("@ C:\\Users\\me\\catalog.txt")


def test_render_message_includes_skip_index_and_error() -> None:
    handler = _make_handler()
    record = _build_record(
        catalog_event="catalog.record.skipped",
        index=4,
        error_message="Record 4 has 13 fields, expected 14",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Skipped malformed record [index=4, Record 4 has 13 fields, expected 14]" in rendered.plain


def test_unknown_event_uses_event_name() -> None:
    handler = _make_handler()
    record = _build_record(catalog_event="catalog.custom")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain == "ℹ️ catalog.custom"


def test_plain_records_fall_back_to_rich_rendering() -> None:
    """Records without a catalog event use the stock message rendering."""

    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
