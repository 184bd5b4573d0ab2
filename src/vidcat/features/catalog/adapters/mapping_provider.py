# Where: vidcat.features.catalog.adapters.mapping_provider
# What: LiveMetadataProvider backed by an in-memory mapping.
# Why: Let callers seed sessions from already-known values and layer overrides on a provider.

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from ..usecases.ports import LiveMetadataProvider


@final
class MappingMetadataProvider:
    """Answer field queries from ``values``, falling back to ``fallback`` when given."""

    def __init__(
        self,
        values: Mapping[str, str],
        fallback: LiveMetadataProvider | None = None,
    ) -> None:
        self._values = dict(values)
        self._fallback = fallback

    def get_field(self, name: str) -> str | None:
        if name in self._values:
            return self._values[name]
        if self._fallback is not None:
            return self._fallback.get_field(name)
        return None


__all__ = ["MappingMetadataProvider"]
