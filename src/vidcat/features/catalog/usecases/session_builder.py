"""
Summary: Derive a complete metadata record from live media metadata.
Why: Seed review sessions for titles that have no stored catalog entry yet.
"""

from __future__ import annotations

from vidcat.platform.logging import logger

from ..domain.fields import FIELD_CATALOG, NULL_SENTINEL, FieldCatalog
from ..domain.record import MetadataRecord
from .ports import LiveMetadataProvider


def build_from_live_source(
    source: LiveMetadataProvider,
    catalog: FieldCatalog = FIELD_CATALOG,
) -> MetadataRecord:
    """Query ``source`` for every catalog field; absent or empty values become ``"null"``."""

    values: list[str] = []
    for name in catalog.names():
        value = source.get_field(name)
        if not value:
            logger.debug("Live metadata has no %s; using %r", name, NULL_SENTINEL)
            values.append(NULL_SENTINEL)
        else:
            values.append(value)
    return MetadataRecord(tuple(values))


__all__ = ["build_from_live_source"]
