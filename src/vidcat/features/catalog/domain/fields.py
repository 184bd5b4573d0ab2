"""
Summary: Fixed, ordered catalogue of recognised video metadata attribute names.
Why: Record shape, catalog column order and report header all derive from one definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, final

FIELD_NAMES: Final[tuple[str, ...]] = (
    "Title",
    "Author",
    "Description",
    "Genre",
    "Year",
    "Date",
    "UserRating",
    "Language",
    "Director",
    "Writer",
    "Copyright",
    "Size",
    "MediaType",
    "Duration",
)

KEY_INDEX: Final[int] = 0
NULL_SENTINEL: Final[str] = "null"


@final
@dataclass(frozen=True, slots=True)
class FieldCatalog:
    """Immutable ordered list of attribute names; index 0 is the record key."""

    field_names: tuple[str, ...] = FIELD_NAMES

    def count(self) -> int:
        """Return the number of fields every record carries."""

        return len(self.field_names)

    def name(self, index: int) -> str:
        """Return the field name at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``0 <= index < count()``.
        """

        if not 0 <= index < len(self.field_names):
            raise IndexError(f"Field index out of range: {index}")
        return self.field_names[index]

    def index_of(self, name: str) -> int:
        """Return the position of ``name``.

        Raises:
            KeyError: If ``name`` is not a recognised field.
        """

        try:
            return self.field_names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def names(self) -> tuple[str, ...]:
        return self.field_names

    @property
    def key_name(self) -> str:
        return self.field_names[KEY_INDEX]


FIELD_CATALOG: Final[FieldCatalog] = FieldCatalog()


__all__ = ["FIELD_CATALOG", "FIELD_NAMES", "FieldCatalog", "KEY_INDEX", "NULL_SENTINEL"]
