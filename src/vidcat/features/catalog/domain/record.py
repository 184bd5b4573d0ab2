"""
Summary: Immutable per-title metadata record aligned positionally to the field catalog.
Why: Guarantee every stored or edited record has exactly one value per recognised field.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import final

from .errors import RecordFormatError
from .fields import FIELD_CATALOG, KEY_INDEX


@final
@dataclass(frozen=True, slots=True)
class MetadataRecord:
    """Ordered string values for one title, one per ``FIELD_CATALOG`` entry."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        values = tuple(str(value) for value in self.values)
        if len(values) != FIELD_CATALOG.count():
            raise RecordFormatError(
                f"Record has {len(values)} fields, expected {FIELD_CATALOG.count()}",
                field_count=len(values),
            )
        object.__setattr__(self, "values", values)

    @classmethod
    def from_values(cls, values: Iterable[str]) -> MetadataRecord:
        return cls(tuple(values))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], *, default: str = "") -> MetadataRecord:
        """Build a record from a name-to-value mapping; absent names use ``default``."""

        return cls(tuple(mapping.get(name, default) for name in FIELD_CATALOG.names()))

    @property
    def key(self) -> str:
        """Title value identifying the record in a store."""

        return self.values[KEY_INDEX]

    def get(self, name: str) -> str:
        """Return the value stored under field ``name``."""

        return self.values[FIELD_CATALOG.index_of(name)]

    def with_field(self, name: str, value: str) -> MetadataRecord:
        return self.with_values({name: value})

    def with_values(self, changes: Mapping[str, str]) -> MetadataRecord:
        """Return a copy with the named fields replaced.

        Raises:
            KeyError: If a name in ``changes`` is not a recognised field.
        """

        updated = list(self.values)
        for name, value in changes.items():
            updated[FIELD_CATALOG.index_of(name)] = value
        return MetadataRecord(tuple(updated))

    def as_dict(self) -> dict[str, str]:
        return dict(zip(FIELD_CATALOG.names(), self.values, strict=True))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __getitem__(self, index: int) -> str:
        return self.values[index]


__all__ = ["MetadataRecord"]
