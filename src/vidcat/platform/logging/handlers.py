"""Rich console handler for catalog events.

Where: platform/logging/handlers.py
What: Render structured ``catalog_event`` log records with icons, colours and compact paths.
Why: Keep console output readable while file logs stay plain text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CatalogRichHandler(RichHandler):
    """Rich handler that styles catalog events and shortens file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "catalog.session.open": ("🎬", "cyan"),
        "catalog.session.seeded": ("📝", "blue"),
        "catalog.session.saved": ("✅", "green"),
        "catalog.session.cancel": ("↩️", "yellow"),
        "catalog.store.loaded": ("📂", "blue"),
        "catalog.store.saved": ("💾", "green"),
        "catalog.report.written": ("📄", "magenta"),
        "catalog.record.skipped": ("⚠️", "yellow"),
        "catalog.error": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "catalog.session.open": "Session opened",
        "catalog.session.seeded": "Session seeded",
        "catalog.session.saved": "Session saved",
        "catalog.session.cancel": "Session cancelled",
        "catalog.store.loaded": "Catalog loaded",
        "catalog.store.saved": "Catalog saved",
        "catalog.report.written": "Report written",
        "catalog.record.skipped": "Skipped malformed record",
        "catalog.error": "Catalog error",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["tracebacks_show_locals"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = anchor.rstrip("\\/") + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_catalog_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured catalog events with dedicated styling."""

        event = getattr(record, "catalog_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        title = getattr(record, "title", None)
        if title:
            _ = body.append(f" '{title}'")

        details: list[str] = []
        source = getattr(record, "source", None)
        if isinstance(source, str):
            details.append(f"from {source}")
        records = getattr(record, "records", None)
        if isinstance(records, int):
            details.append(f"records={records}")
        index = getattr(record, "index", None)
        if isinstance(index, int):
            details.append(f"index={index}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        path = getattr(record, "path", None)
        if path:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for catalog events."""

        catalog_text = self._render_catalog_message(record)
        if catalog_text is not None:
            return catalog_text

        return super().render_message(record, message)


__all__ = ["CatalogRichHandler"]
