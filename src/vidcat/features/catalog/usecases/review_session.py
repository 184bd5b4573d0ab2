"""Review session controller.

Where: src/vidcat/features/catalog/usecases/review_session.py
What: Drive one open/edit/confirm-or-cancel cycle against the catalog and its report.
Why: Give the load, persist and render steps explicit states and failure boundaries.

States::

    CLOSED -> LOADING -> EDITING -> SAVING -> CLOSED
                         EDITING -> CLOSED            (cancel)

A confirm runs upsert, save and render in that order. The report is only
rendered after the catalog was written successfully. Failures put the
session back into EDITING so the caller can retry or cancel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, final

from vidcat.platform.logging import logger

from ..domain.errors import CatalogError, SessionStateError
from ..domain.fields import FIELD_CATALOG, NULL_SENTINEL
from ..domain.record import MetadataRecord
from .ports import EditingSurface, LiveMetadataProvider
from .record_store import RecordStore
from .renderer import CatalogRenderer
from .session_builder import build_from_live_source


class SessionState(str, Enum):
    """Lifecycle states of a review session."""

    CLOSED = "closed"
    LOADING = "loading"
    EDITING = "editing"
    SAVING = "saving"


SeedSource = Literal["catalog", "live"]


@dataclass(slots=True, frozen=True)
class SessionResult:
    """Outcome of a confirmed session."""

    record: MetadataRecord
    store: RecordStore
    catalog_path: Path
    report_path: Path


@final
class ReviewSession:
    """Open, edit and persist the catalog entry for the currently loaded media."""

    def __init__(
        self,
        provider: LiveMetadataProvider,
        catalog_path: Path,
        report_path: Path,
        *,
        renderer: CatalogRenderer | None = None,
        atomic_writes: bool = False,
        skip_malformed: bool = False,
    ) -> None:
        self._provider = provider
        self._catalog_path = catalog_path
        self._report_path = report_path
        self._renderer = renderer or CatalogRenderer()
        self._atomic_writes = atomic_writes
        self._skip_malformed = skip_malformed

        self._state = SessionState.CLOSED
        self._store: RecordStore | None = None
        self._record: MetadataRecord | None = None
        self._seed_source: SeedSource | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def record(self) -> MetadataRecord | None:
        """Record that seeded the current session, if one is open."""

        return self._record

    @property
    def store(self) -> RecordStore | None:
        return self._store

    @property
    def seed_source(self) -> SeedSource | None:
        return self._seed_source

    def _require(self, expected: SessionState, action: str) -> None:
        if self._state is not expected:
            raise SessionStateError(
                f"Cannot {action} a session in state '{self._state.value}'",
                state=self._state.value,
            )

    def _reset(self) -> None:
        self._state = SessionState.CLOSED
        self._store = None
        self._record = None
        self._seed_source = None

    def open(self) -> MetadataRecord:
        """Load the catalog and seed the session for the live media's title.

        Returns:
            MetadataRecord: The stored entry when the title is catalogued,
            otherwise a record built from live metadata.

        Raises:
            SessionStateError: If the session is not closed.
            CatalogError: If the catalog cannot be loaded; the session stays closed.
        """

        self._require(SessionState.CLOSED, "open")
        self._state = SessionState.LOADING

        try:
            title = self._provider.get_field(FIELD_CATALOG.key_name) or NULL_SENTINEL
            logger.info(
                "Opening session for '%s'",
                title,
                extra={
                    "catalog_event": "catalog.session.open",
                    "title": title,
                    "path": self._catalog_path,
                },
            )

            store = RecordStore.load(self._catalog_path, skip_malformed=self._skip_malformed)
            stored = store.find_by_key(title)
            source: SeedSource
            if stored is not None:
                record, source = stored, "catalog"
            else:
                record, source = build_from_live_source(self._provider), "live"
        except Exception:
            self._reset()
            raise

        self._store = store
        self._record = record
        self._seed_source = source
        self._state = SessionState.EDITING

        logger.info(
            "Session for '%s' seeded from %s",
            title,
            source,
            extra={"catalog_event": "catalog.session.seeded", "title": title, "source": source},
        )
        return record

    def confirm(self, record: MetadataRecord) -> SessionResult:
        """Persist ``record`` and regenerate the report.

        Raises:
            SessionStateError: If the session is not editing.
            RecordFormatError: If ``record`` cannot be written in the catalog grammar.
            StoreIOError: If the catalog cannot be written; nothing is rendered.
            RenderIOError: If the report cannot be written after a successful save.
        """

        self._require(SessionState.EDITING, "confirm")
        assert self._store is not None
        self._state = SessionState.SAVING

        updated = self._store.upsert(record)
        try:
            updated.save(self._catalog_path, atomic=self._atomic_writes)
        except CatalogError:
            self._state = SessionState.EDITING
            raise

        self._store = updated
        try:
            _ = self._renderer.write_report(self._report_path, updated)
        except CatalogError:
            self._state = SessionState.EDITING
            raise

        saved = updated.find_by_key(record.key)
        assert saved is not None
        logger.info(
            "Saved '%s'",
            saved.key,
            extra={"catalog_event": "catalog.session.saved", "title": saved.key, "records": len(updated)},
        )
        self._reset()
        return SessionResult(
            record=saved,
            store=updated,
            catalog_path=self._catalog_path,
            report_path=self._report_path,
        )

    def cancel(self) -> None:
        """Close the session without touching the catalog or the report."""

        self._require(SessionState.EDITING, "cancel")
        title = self._record.key if self._record is not None else None
        logger.info(
            "Cancelled session for '%s'",
            title,
            extra={"catalog_event": "catalog.session.cancel", "title": title},
        )
        self._reset()

    def run(self, surface: EditingSurface) -> SessionResult | None:
        """Open the session, hand the record to ``surface`` and apply its decision.

        Returns:
            SessionResult | None: The saved outcome, or ``None`` when cancelled.
        """

        record = self.open()
        outcome = surface.edit(record)
        if not outcome.confirmed:
            self.cancel()
            return None
        return self.confirm(outcome.record)


__all__ = ["ReviewSession", "SeedSource", "SessionResult", "SessionState"]
