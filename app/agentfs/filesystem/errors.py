"""Exceptions raised by filesystem operations."""

import os


class FileSystemError(Exception):
    """Base exception for agentfs filesystem operations."""


class DeletionError(FileSystemError):
    """Raised when an entry cannot be removed.

    Attributes:
        path: The entry that could not be deleted.
        reason: The underlying OSError (permission, lock, path length, ...).
    """

    def __init__(self, path: str | os.PathLike[str], reason: OSError) -> None:
        self.path = os.fspath(path)
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(f"Failed to delete {self.path}: {detail}")


class CancelledError(FileSystemError):
    """Raised when a deletion was abandoned because cancellation was requested.

    Entries removed before the cancellation point stay removed, so the
    target must be treated as partially deleted.

    Attributes:
        path: The entry about to be processed when cancellation was observed.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        super().__init__(f"Deletion cancelled at {self.path}")
