"""
Summary: Ordered in-memory catalog with flat-file load, key lookup, upsert and save.
Why: The catalog file is the only persistent state; sessions rebuild the store from it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import final

from vidcat.config.file_ops import write_text_file, write_text_file_atomic
from vidcat.platform.logging import logger

from ..domain.catalog_format import parse_catalog, serialize_catalog
from ..domain.errors import StoreIOError
from ..domain.fields import KEY_INDEX
from ..domain.record import MetadataRecord


@final
@dataclass(frozen=True, slots=True)
class RecordStore:
    """Immutable ordered sequence of metadata records.

    The default save truncates and rewrites the catalog in place. A failure part
    way through can leave a truncated or empty file; pass ``atomic=True`` to stage
    the content in a temporary file and rename it into place instead. Nothing
    guards against two writers touching the same file.
    """

    records: tuple[MetadataRecord, ...] = ()

    @classmethod
    def empty(cls) -> RecordStore:
        return cls()

    @classmethod
    def from_records(cls, records: Iterable[MetadataRecord]) -> RecordStore:
        return cls(tuple(records))

    @classmethod
    def load(cls, path: Path, *, skip_malformed: bool = False) -> RecordStore:
        """Load the catalog stored at ``path``.

        A missing file is a valid initial state and yields an empty store.

        Args:
            path: Catalog file location.
            skip_malformed: Drop malformed records (logging each) instead of
                refusing the whole catalog.

        Returns:
            RecordStore: Records in file order.

        Raises:
            RecordFormatError: If a record has the wrong number of fields and
                ``skip_malformed`` is false.
            StoreIOError: If the file exists but cannot be read or decoded.
        """

        if not path.exists():
            logger.debug("Catalog %s does not exist; starting with an empty store", path)
            return cls.empty()

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read catalog %s: %s", path, exc)
            raise StoreIOError(f"Failed to read catalog {path}: {exc}", path=path) from exc

        records, skipped = parse_catalog(text, skip_malformed=skip_malformed)
        for error in skipped:
            logger.warning(
                "Skipped malformed record %s in %s: %s",
                error.index,
                path,
                error,
                extra={"catalog_event": "catalog.record.skipped", "index": error.index, "path": path},
            )

        logger.info(
            "Loaded %d records from %s",
            len(records),
            path,
            extra={"catalog_event": "catalog.store.loaded", "records": len(records), "path": path},
        )
        return cls(tuple(records))

    def find_by_key(self, key: str) -> MetadataRecord | None:
        """Return the first record whose title equals ``key`` exactly."""

        for record in self.records:
            if record[KEY_INDEX] == key:
                return record
        return None

    def index_of_key(self, key: str) -> int | None:
        for index, record in enumerate(self.records):
            if record[KEY_INDEX] == key:
                return index
        return None

    def upsert(self, record: MetadataRecord) -> RecordStore:
        """Return a new store with ``record`` merged in.

        When a record with the same title exists, its non-key fields are
        replaced by ``record``'s and its stored key is kept. Otherwise
        ``record`` is appended.
        """

        index = self.index_of_key(record.key)
        if index is None:
            return RecordStore((*self.records, record))

        existing = self.records[index]
        merged = MetadataRecord((existing[KEY_INDEX], *record.values[KEY_INDEX + 1 :]))
        updated = list(self.records)
        updated[index] = merged
        return RecordStore(tuple(updated))

    def save(self, path: Path, *, atomic: bool = False) -> None:
        """Rewrite ``path`` with every record in this store.

        Raises:
            RecordFormatError: If a value contains a separator or line break.
            StoreIOError: If the file cannot be written.
        """

        content = serialize_catalog(self.records)
        writer = write_text_file_atomic if atomic else write_text_file
        try:
            writer(path, content)
        except OSError as exc:
            logger.error(
                "Failed to write catalog %s: %s",
                path,
                exc,
                extra={"catalog_event": "catalog.error", "error_message": str(exc), "path": path},
            )
            raise StoreIOError(f"Failed to write catalog {path}: {exc}", path=path) from exc

        logger.info(
            "Saved %d records to %s",
            len(self.records),
            path,
            extra={"catalog_event": "catalog.store.saved", "records": len(self.records), "path": path},
        )

    def keys(self) -> list[str]:
        return [record.key for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MetadataRecord]:
        return iter(self.records)


__all__ = ["RecordStore"]
