"""Flat-text catalog grammar.

Where: src/vidcat/features/catalog/domain/catalog_format.py
What: Parse and serialise ``field;field;...;/`` records with validated field counts.
Why: Keep the on-disk format pure and testable apart from file I/O.

Grammar::

    file   := record*
    record := field (';' field)* ';' '/' '\\n'

Physical line breaks carry no meaning when reading; the separators are the
only structure. The reader also accepts a record whose last field runs
straight into ``/`` without its ``;``. The writer always emits the ``;``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .errors import RecordFormatError
from .fields import FIELD_CATALOG
from .record import MetadataRecord

FIELD_SEPARATOR: Final[str] = ";"
RECORD_SEPARATOR: Final[str] = "/"
RECORD_TERMINATOR: Final[str] = RECORD_SEPARATOR + "\n"

_RESERVED_CHARACTERS: Final[tuple[str, ...]] = (FIELD_SEPARATOR, RECORD_SEPARATOR, "\n", "\r")


def _parse_segment(segment: str, index: int) -> MetadataRecord:
    body = segment[: -len(FIELD_SEPARATOR)] if segment.endswith(FIELD_SEPARATOR) else segment
    fields = body.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_CATALOG.count():
        raise RecordFormatError(
            f"Record {index} has {len(fields)} fields, expected {FIELD_CATALOG.count()}",
            index=index,
            field_count=len(fields),
        )
    return MetadataRecord(tuple(fields))


def parse_catalog(
    text: str,
    *,
    skip_malformed: bool = False,
) -> tuple[list[MetadataRecord], list[RecordFormatError]]:
    """Parse catalog text into records.

    Args:
        text: Full catalog file content.
        skip_malformed: Drop malformed segments instead of raising.

    Returns:
        The parsed records in file order, and the errors for any segments
        that were skipped (always empty unless ``skip_malformed``).

    Raises:
        RecordFormatError: For the first malformed segment when
            ``skip_malformed`` is false. A non-blank remainder after the last
            terminator counts as a truncated record.
    """

    stream = text.replace("\r", "").replace("\n", "")
    segments = stream.split(RECORD_SEPARATOR)
    remainder = segments.pop()

    records: list[MetadataRecord] = []
    skipped: list[RecordFormatError] = []

    for index, segment in enumerate(segments):
        try:
            records.append(_parse_segment(segment, index))
        except RecordFormatError as exc:
            if not skip_malformed:
                raise
            skipped.append(exc)

    if remainder.strip():
        error = RecordFormatError(
            f"Record {len(segments)} is not terminated by '{RECORD_SEPARATOR}'",
            index=len(segments),
            field_count=len(remainder.split(FIELD_SEPARATOR)),
        )
        if not skip_malformed:
            raise error
        skipped.append(error)

    return records, skipped


def serialize_record(record: MetadataRecord, index: int = 0) -> str:
    """Serialise one record including its trailing separator and terminator.

    Raises:
        RecordFormatError: If a value contains a separator or a line break,
            which the grammar cannot represent.
    """

    for position, value in enumerate(record):
        if any(char in value for char in _RESERVED_CHARACTERS):
            raise RecordFormatError(
                f"Record {index} field {FIELD_CATALOG.name(position)} contains a reserved "
                f"character ({FIELD_SEPARATOR!r}, {RECORD_SEPARATOR!r} or a line break)",
                index=index,
                field_count=len(record),
            )
    return FIELD_SEPARATOR.join(record) + FIELD_SEPARATOR + RECORD_TERMINATOR


def serialize_catalog(records: Iterable[MetadataRecord]) -> str:
    return "".join(serialize_record(record, index) for index, record in enumerate(records))


__all__ = [
    "FIELD_SEPARATOR",
    "RECORD_SEPARATOR",
    "RECORD_TERMINATOR",
    "parse_catalog",
    "serialize_catalog",
    "serialize_record",
]
