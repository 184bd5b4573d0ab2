# Where: vidcat.features.catalog.domain
# What: Pure catalog types: field catalogue, records, grammar and errors.
# Why: Keep data rules free of file I/O so use cases and tests share them.

from .catalog_format import parse_catalog, serialize_catalog, serialize_record
from .errors import (
    CatalogError,
    RecordFormatError,
    RenderIOError,
    SessionStateError,
    StoreIOError,
)
from .fields import FIELD_CATALOG, FIELD_NAMES, KEY_INDEX, NULL_SENTINEL, FieldCatalog
from .record import MetadataRecord

__all__ = [
    "CatalogError",
    "FIELD_CATALOG",
    "FIELD_NAMES",
    "FieldCatalog",
    "KEY_INDEX",
    "MetadataRecord",
    "NULL_SENTINEL",
    "RecordFormatError",
    "RenderIOError",
    "SessionStateError",
    "StoreIOError",
    "parse_catalog",
    "serialize_catalog",
    "serialize_record",
]
