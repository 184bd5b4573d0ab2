"""Live metadata provider backed by mutagen.

Where: src/vidcat/features/catalog/adapters/mutagen_provider.py
What: Read catalog field values from a media file's tags and stream info.
Why: Seed review sessions for uncatalogued titles from the media itself.
"""

from __future__ import annotations

import abc
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, ClassVar, Final, final

from typing_extensions import override

import mutagen
from mutagen import MutagenError
from mutagen.asf import ASF
from mutagen.mp4 import MP4

from vidcat.platform.logging import logger

from ..domain.fields import FIELD_CATALOG

__all__ = [
    "AsfTagReader",
    "EasyTagReader",
    "MediaTagReader",
    "Mp4TagReader",
    "MutagenMetadataProvider",
]

_YEAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d{4}")


def _first_text(value: Any) -> str | None:
    """Return the first tag value as text, decoding freeform bytes."""

    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    if value is None:
        return None
    # ASF attributes wrap their payload in ``.value``.
    value = getattr(value, "value", value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class MediaTagReader(abc.ABC):
    """Base class mapping catalog fields to one container family's tag keys."""

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    TAG_MAPPING: ClassVar[dict[str, str]] = {}

    def _open_file(self, file_path: Path) -> Any:
        """Open ``file_path`` with the reader's mutagen class."""

        # Read through the class so plain functions such as ``mutagen.File`` stay unbound.
        file_class = type(self).FILE_CLASS
        if file_class is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            media = file_class(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            logger.error(
                "Failed to read %s metadata from %s: %s",
                self.__class__.__name__.replace("TagReader", ""),
                file_path,
                exc,
            )
            raise
        if media is None:
            raise ValueError(f"Unsupported file format: {file_path.suffix}")
        return media

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if tags is None:
            return None
        return _first_text(tags.get(key))

    def read_fields(self, file_path: Path) -> dict[str, str | None]:
        """Return a value (or ``None``) for every catalog field."""

        media = self._open_file(file_path)
        tags = getattr(media, "tags", None)
        logger.debug("Opened %s with tags type: %s", file_path, type(tags))

        fields: dict[str, str | None] = {name: None for name in FIELD_CATALOG.names()}
        for name, key in self.TAG_MAPPING.items():
            fields[name] = self._get_tag_value(tags, key)

        if not fields["Year"] and fields["Date"]:
            match = _YEAR_PATTERN.search(fields["Date"])
            fields["Year"] = match.group(0) if match else None

        fields["Size"] = str(file_path.stat().st_size)

        mime = getattr(media, "mime", None)
        fields["MediaType"] = mime[0] if mime else None

        length = getattr(getattr(media, "info", None), "length", None)
        fields["Duration"] = str(int(round(length * 1000))) if length else None

        logger.debug("Read live metadata for %s: %s", file_path, fields)
        return fields


@final
class Mp4TagReader(MediaTagReader):
    """Reader for MP4/QuickTime containers using iTunes-style atoms."""

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = MP4

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "Title": "\xa9nam",
        "Author": "\xa9ART",
        "Description": "desc",
        "Genre": "\xa9gen",
        "Date": "\xa9day",
        "UserRating": "----:com.apple.iTunes:RATING",
        "Language": "----:com.apple.iTunes:LANGUAGE",
        "Director": "----:com.apple.iTunes:DIRECTOR",
        "Writer": "\xa9wrt",
        "Copyright": "cprt",
    }


@final
class AsfTagReader(MediaTagReader):
    """Reader for ASF containers (WMV/WMA) using Windows Media attributes."""

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = ASF

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "Title": "Title",
        "Author": "Author",
        "Description": "Description",
        "Genre": "WM/Genre",
        "Year": "WM/Year",
        "UserRating": "WM/SharedUserRating",
        "Language": "WM/Language",
        "Director": "WM/Director",
        "Writer": "WM/Writer",
        "Copyright": "Copyright",
    }


@final
class EasyTagReader(MediaTagReader):
    """Reader for any other format mutagen recognises, via its easy tag keys."""

    FILE_CLASS: ClassVar[Callable[..., Any] | None] = mutagen.File
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"easy": True}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "Title": "title",
        "Author": "artist",
        "Description": "description",
        "Genre": "genre",
        "Date": "date",
        "Language": "language",
        "Writer": "lyricist",
        "Copyright": "copyright",
    }

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if tags is None:
            return None
        try:
            return _first_text(tags.get(key))
        except (KeyError, ValueError):
            # Easy interfaces reject keys they have no mapping for.
            return None


@final
class MutagenMetadataProvider:
    """``LiveMetadataProvider`` reading the tags of one media file.

    The file is read on first access and the values are cached.
    """

    _format_map: ClassVar[dict[str, MediaTagReader]] = {
        ".mp4": Mp4TagReader(),
        ".m4v": Mp4TagReader(),
        ".mov": Mp4TagReader(),
        ".m4a": Mp4TagReader(),
        ".wmv": AsfTagReader(),
        ".asf": AsfTagReader(),
        ".wma": AsfTagReader(),
    }
    _fallback_reader: ClassVar[MediaTagReader] = EasyTagReader()

    def __init__(self, media_path: Path) -> None:
        self._media_path = media_path
        self._fields: dict[str, str | None] | None = None

    @property
    def media_path(self) -> Path:
        return self._media_path

    def _reader(self) -> MediaTagReader:
        return self._format_map.get(self._media_path.suffix.lower(), self._fallback_reader)

    def read(self) -> dict[str, str | None]:
        """Read (once) and return every catalog field for the media file.

        Raises:
            FileNotFoundError: If the media file does not exist.
            ValueError: If mutagen does not recognise the format.
        """

        if self._fields is None:
            if not self._media_path.is_file():
                raise FileNotFoundError(f"Media file not found: {self._media_path}")
            self._fields = self._reader().read_fields(self._media_path)
        return self._fields

    def get_field(self, name: str) -> str | None:
        return self.read().get(name)
