"""Where vidcat keeps its files.

Everything lives beside the checkout so a copied repository carries its
catalog along:

- ``config/config.toml``: settings read by ``Config.load``
- ``.data/catalog.txt`` and ``.data/index.html``: the catalog and its
  report. Set ``VIDCAT_DATA_DIR`` to move both somewhere else.
- ``logs/vidcat.log``: the rotating CLI log
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_DATA_DIR: Final[str] = "VIDCAT_DATA_DIR"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")

CATALOG_FILE_NAME: Final[str] = "catalog.txt"
REPORT_FILE_NAME: Final[str] = "index.html"
LOG_FILE_NAME: Final[str] = "vidcat.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick a location: the explicit path, then a non-blank ``env_var``, then the default.

    ``env`` defaults to ``os.environ``. The result is always absolute.
    """

    chosen: Path | str | None = explicit_path
    if chosen is None and env_var:
        from_env = (env if env is not None else os.environ).get(env_var, "").strip()
        chosen = from_env or None

    target = Path(chosen) if chosen is not None else default_factory()
    return target.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a project marker.

    Falls back to the working directory when vidcat runs from an installed
    wheel with no checkout around it.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def _under_repo(*parts: str) -> Path:
    return _detect_repo_root().joinpath(*parts).resolve()


def default_config_path() -> Path:
    """``<repo>/config/config.toml``."""

    return _under_repo("config", "config.toml")


def default_data_dir() -> Path:
    """Directory holding the catalog and the report."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_DATA_DIR,
        default_factory=lambda: _under_repo(".data"),
    )


def default_catalog_path() -> Path:
    return (default_data_dir() / CATALOG_FILE_NAME).resolve()


def default_report_path() -> Path:
    return (default_data_dir() / REPORT_FILE_NAME).resolve()


def default_log_dir() -> Path:
    """Log directory; not affected by ``VIDCAT_DATA_DIR``."""

    return _under_repo("logs")


def default_log_file() -> Path:
    return (default_log_dir() / LOG_FILE_NAME).resolve()


__all__ = [
    "CATALOG_FILE_NAME",
    "LOG_FILE_NAME",
    "REPORT_FILE_NAME",
    "default_catalog_path",
    "default_config_path",
    "default_data_dir",
    "default_log_dir",
    "default_log_file",
    "default_report_path",
    "resolve_overridable_path",
]
