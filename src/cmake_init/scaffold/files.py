"""File helpers for the scaffold writer.

Each helper opens its file in a ``with`` block and turns OSError into
ArtifactIOError naming the path and the operation. Existing user files
are read and appended to as bytes, so their encoding is never assumed.
"""

from __future__ import annotations

from pathlib import Path

from cmake_init.errors import ArtifactIOError


def read_bytes(path: Path) -> bytes:
    """Return the raw content of path."""
    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as e:
        raise ArtifactIOError(str(path), "reading", e.strerror or str(e)) from e


def write(path: Path, data: str) -> None:
    """Create or truncate path and write data to it.

    Missing parent directories are created first.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactIOError(str(path.parent), "creating", e.strerror or str(e)) from e
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(data)
    except OSError as e:
        raise ArtifactIOError(str(path), "writing", e.strerror or str(e)) from e


def append_bytes(path: Path, data: bytes) -> None:
    """Append data to the end of path without touching existing content."""
    try:
        with path.open("ab") as f:
            f.write(data)
    except OSError as e:
        raise ArtifactIOError(str(path), "appending", e.strerror or str(e)) from e
