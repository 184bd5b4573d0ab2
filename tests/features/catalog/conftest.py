"""Shared pytest fixtures for catalog tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from vidcat.features.catalog import FIELD_NAMES, MetadataRecord

RecordFactory = Callable[..., MetadataRecord]


def make_record(title: str = "Matrix", **overrides: str) -> MetadataRecord:
    """Build a complete record whose values default to ``<field>-<title>``."""

    values = {name: f"{name.lower()}-{title}" for name in FIELD_NAMES}
    values["Title"] = title
    values.update(overrides)
    return MetadataRecord.from_mapping(values)


@pytest.fixture
def record_factory() -> RecordFactory:
    """Provide the ``make_record`` helper to tests."""

    return make_record
