"""Catalog error taxonomy.

Where: src/vidcat/features/catalog/domain/errors.py
What: Exception hierarchy raised by the record store, renderer and review session.
Why: Callers distinguish malformed data from I/O failures without parsing messages.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base exception for catalog errors."""


class RecordFormatError(CatalogError):
    """Raised when a record does not carry exactly one value per catalog field.

    Attributes:
        index: Zero-based position of the offending record, when known.
        field_count: Number of fields found in the offending record, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        field_count: int | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.field_count = field_count


class StoreIOError(CatalogError):
    """Raised when the catalog file cannot be read or written."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RenderIOError(CatalogError):
    """Raised when the derived report cannot be written."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class SessionStateError(CatalogError):
    """Raised when a review session is driven through an invalid transition."""

    def __init__(self, message: str, *, state: str) -> None:
        super().__init__(message)
        self.state = state


__all__ = [
    "CatalogError",
    "RecordFormatError",
    "RenderIOError",
    "SessionStateError",
    "StoreIOError",
]
