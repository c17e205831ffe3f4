"""Pre-write checks against the target directory.

Decides, per output path, whether the writer may create it, must append
to it, should leave it alone, or must abort the whole run.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from cmake_init.errors import ArtifactExistsError


class WriteMode(str, Enum):
    """How an artifact treats a file that is already on disk."""

    create_if_absent = "create_if_absent"
    create_or_append = "create_or_append"
    create_or_abort = "create_or_abort"


class Decision(str, Enum):
    """What the writer does with one artifact."""

    create = "create"
    append = "append"
    skip = "skip"
    abort = "abort"


def decide(directory: Path, relative_path: str, mode: WriteMode) -> Decision:
    """Classify relative_path under directory for the given write mode."""
    exists = (directory / relative_path).exists()
    if not exists:
        return Decision.create
    if mode is WriteMode.create_or_append:
        return Decision.append
    if mode is WriteMode.create_or_abort:
        return Decision.abort
    return Decision.skip


def ensure_absent(directory: Path, relative_paths: Iterable[str]) -> None:
    """Check every path before any of them is written.

    Raises:
        ArtifactExistsError: For the first path, in the given order, that
            already exists.
    """
    for relative_path in relative_paths:
        if decide(directory, relative_path, WriteMode.create_or_abort) is Decision.abort:
            raise ArtifactExistsError(relative_path)


def ignore_entry_present(content: bytes, entry: bytes) -> bool:
    """Whether raw ignore file content already lists entry on a line of its own."""
    return any(line.strip() == entry for line in content.splitlines())
