"""Catalog use cases: store operations, report rendering and review sessions."""

from .ports import EditOutcome, EditingSurface, LiveMetadataProvider
from .record_store import RecordStore
from .renderer import REPORT_STYLE, CatalogRenderer
from .review_session import ReviewSession, SessionResult, SessionState
from .session_builder import build_from_live_source

__all__ = [
    "CatalogRenderer",
    "EditOutcome",
    "EditingSurface",
    "LiveMetadataProvider",
    "REPORT_STYLE",
    "RecordStore",
    "ReviewSession",
    "SessionResult",
    "SessionState",
    "build_from_live_source",
]
