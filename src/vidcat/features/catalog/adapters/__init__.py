"""Adapters supplying live metadata to catalog use cases."""

from .mapping_provider import MappingMetadataProvider
from .mutagen_provider import MutagenMetadataProvider

__all__ = ["MappingMetadataProvider", "MutagenMetadataProvider"]
