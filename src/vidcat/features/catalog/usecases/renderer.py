"""Static HTML report of the whole catalog.

Where: src/vidcat/features/catalog/usecases/renderer.py
What: Render a self-contained table (header row plus one row per record) and write it out.
Why: Give users a browsable view of the catalog that is regenerated after each save.

Values are inserted verbatim. Markup inside a value (``<``, ``&`` ...) ends
up in the document as-is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final, final

from vidcat.config.file_ops import write_text_file
from vidcat.platform.logging import logger

from ..domain.errors import RenderIOError
from ..domain.fields import FIELD_CATALOG, FieldCatalog
from .record_store import RecordStore

REPORT_STYLE: Final[str] = (
    "<style>"
    "table{font-family:arial,sans-serif;text-align:left;width:100%}"
    "td,th{border:1px solid #ddd;padding:8px}"
    "tr:nth-child(even){background-color:#ddd}"
    "</style>"
)


@final
class CatalogRenderer:
    """Produce the derived report from a record store."""

    def __init__(self, catalog: FieldCatalog = FIELD_CATALOG) -> None:
        self._catalog = catalog

    def render(self, store: RecordStore) -> str:
        """Return the report document for ``store``."""

        html_parts: list[str] = ["<!doctype html>", REPORT_STYLE, "<table>"]

        header_cells = "".join(f"<th>{name}</th>" for name in self._catalog.names())
        html_parts.append(f"  <tr>{header_cells}</tr>")

        for record in store:
            html_parts.append("  <tr>")
            html_parts.extend(f"    <td>{value}</td>" for value in record)
            html_parts.append("  </tr>")

        html_parts.append("</table>")
        return "\n".join(html_parts) + "\n"

    def write_report(self, path: Path, store: RecordStore) -> Path:
        """Render ``store`` and overwrite ``path`` with the result.

        Raises:
            RenderIOError: If the report cannot be written.
        """

        content = self.render(store)
        try:
            write_text_file(path, content)
        except OSError as exc:
            logger.error(
                "Failed to write report %s: %s",
                path,
                exc,
                extra={"catalog_event": "catalog.error", "error_message": str(exc), "path": path},
            )
            raise RenderIOError(f"Failed to write report {path}: {exc}", path=path) from exc

        logger.info(
            "Wrote report for %d records to %s",
            len(store),
            path,
            extra={"catalog_event": "catalog.report.written", "records": len(store), "path": path},
        )
        return path


__all__ = ["CatalogRenderer", "REPORT_STYLE"]
