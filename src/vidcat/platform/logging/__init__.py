"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import (
    DEFAULT_LOG_FILE,
    LOGGER_NAME,
    CatalogFileFormatter,
    console_level_for,
    logger,
    setup_logger,
)
from .handlers import CatalogRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "CatalogFileFormatter",
    "CatalogRichHandler",
    "console_level_for",
    "logger",
    "setup_logger",
]
