"""
Summary: Ports describing collaborators the catalog use cases consume.
Why: Decouple use cases from concrete adapters so tests and swaps stay simple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..domain.record import MetadataRecord


@runtime_checkable
class LiveMetadataProvider(Protocol):
    """Port for metadata of the currently loaded media."""

    def get_field(self, name: str) -> str | None:
        """Return the tag value for ``name``, or ``None`` when not present."""
        ...


@dataclass(frozen=True, slots=True)
class EditOutcome:
    """Result handed back by an editing surface."""

    record: MetadataRecord
    confirmed: bool


@runtime_checkable
class EditingSurface(Protocol):
    """Port for the surface where a user reviews and edits a record."""

    def edit(self, record: MetadataRecord) -> EditOutcome:
        """Present ``record`` and return the edited record with the user's decision."""
        ...


__all__ = ["EditOutcome", "EditingSurface", "LiveMetadataProvider"]
