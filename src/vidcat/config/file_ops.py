"""Utility helpers for text file persistence.

Catalog, report and config writes all go through these helpers. The plain
variant truncates and rewrites in place; the atomic variant stages the
content in a sibling temporary file and swaps it in with ``os.replace``.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would give a new file under the current umask."""

    umask = os.umask(0)
    _ = os.umask(umask)
    return 0o666 & ~umask


def write_text_file_atomic(path: Path, content: str) -> None:
    """Persist textual content via a temporary sibling and an atomic rename.

    The replaced file keeps its permission bits; a new file gets the same
    mode the plain writer would create it with.

    Args:
        path: Final destination of the content.
        content: Text to write (UTF-8).

    Raises:
        OSError: When the temporary file cannot be written or moved.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        # mkstemp creates 0600 files.
        if path.exists():
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


__all__ = ["write_text_file", "write_text_file_atomic"]
