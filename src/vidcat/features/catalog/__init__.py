# Where: vidcat.features.catalog.__init__
# What: Expose catalog types, store, renderer, session controller and providers.
# Why: Provide a cohesive import surface for UI and integration layers.

from .adapters import MappingMetadataProvider, MutagenMetadataProvider
from .domain import (
    FIELD_CATALOG,
    FIELD_NAMES,
    NULL_SENTINEL,
    CatalogError,
    FieldCatalog,
    MetadataRecord,
    RecordFormatError,
    RenderIOError,
    SessionStateError,
    StoreIOError,
)
from .usecases import (
    CatalogRenderer,
    EditOutcome,
    EditingSurface,
    LiveMetadataProvider,
    RecordStore,
    ReviewSession,
    SessionResult,
    SessionState,
    build_from_live_source,
)

__all__ = [
    "FIELD_CATALOG",
    "FIELD_NAMES",
    "NULL_SENTINEL",
    "CatalogError",
    "CatalogRenderer",
    "EditOutcome",
    "EditingSurface",
    "FieldCatalog",
    "LiveMetadataProvider",
    "MappingMetadataProvider",
    "MetadataRecord",
    "MutagenMetadataProvider",
    "RecordFormatError",
    "RecordStore",
    "RenderIOError",
    "ReviewSession",
    "SessionResult",
    "SessionState",
    "SessionStateError",
    "StoreIOError",
    "build_from_live_source",
]
