"""Error kinds raised by the scaffolding pipeline.

Every fatal condition derives from CmakeInitError so the CLI can report
it with a single handler. Nothing is retried and nothing already written
is rolled back.
"""

from __future__ import annotations


class CmakeInitError(Exception):
    """Base class for all cmake-init failures."""


class OptionConflictError(CmakeInitError):
    """Raised when two mutually exclusive options are both supplied."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"{first} excludes {second}")


class ConfigurationError(CmakeInitError):
    """Raised when options or a defaults file cannot form a valid configuration."""


class ArtifactExistsError(CmakeInitError):
    """Raised when a core project-definition file is already present."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} already exists")


class ArtifactIOError(CmakeInitError):
    """Raised when reading or writing a file fails.

    Attributes:
        path: The path the operation was performed on.
        operation: One of 'reading', 'writing', 'appending', 'creating'.
    """

    def __init__(self, path: str, operation: str, reason: str = "") -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        message = f"error opening {path} for {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvariantViolationError(CmakeInitError):
    """Raised when an enum value has no entry in its string table."""


class VcsError(CmakeInitError):
    """Raised when the repository could not be initialized."""
