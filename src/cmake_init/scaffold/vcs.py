"""Repository initialization for new projects."""

from __future__ import annotations

import subprocess
from pathlib import Path

from cmake_init.errors import VcsError
from cmake_init.models.options import Vcs
from cmake_init.observability import get_logger

logger = get_logger("vcs")


def init_repository(directory: Path, vcs: Vcs) -> bool:
    """Initialize a repository in directory for the given VCS.

    Does nothing for Vcs.none or when directory already holds a
    repository.

    Returns:
        True if a repository was created.

    Raises:
        VcsError: If the VCS executable is missing or exits non-zero.
    """
    if vcs is Vcs.none:
        return False
    if (directory / ".git").exists():
        logger.debug("vcs.already_initialized", directory=str(directory))
        return False

    cmd = ["git", "init"]
    try:
        proc = subprocess.run(
            cmd,
            cwd=directory,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise VcsError("git executable not found on PATH") from e

    if proc.returncode != 0:
        detail = (proc.stderr or proc.stdout or "").strip()
        raise VcsError(f"git init failed with exit code {proc.returncode}: {detail}")

    logger.info("vcs.initialized", directory=str(directory), vcs=str(vcs))
    return True
