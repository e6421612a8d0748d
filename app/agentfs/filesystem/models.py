"""Filesystem domain models for tree deletion.

This module defines the transient data structures the deleter works
with: the kind of a directory entry, an lstat-based snapshot of one
entry, and the per-path result reported by batch deletions.
"""

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Type of filesystem entry as seen without following links.

    Attributes:
        DIRECTORY: Real directory that may be traversed.
        FILE: Regular file (or any other non-directory, non-link entry).
        LINK: Symbolic link, junction or other reparse point. Always a leaf.
    """

    DIRECTORY = "directory"
    FILE = "file"
    LINK = "link"


@dataclass(frozen=True, slots=True)
class Entry:
    """Snapshot of a single filesystem entry.

    Attributes:
        path: Path of the entry as a string.
        kind: Entry kind, determined from lstat (links are never followed).
        mode: Raw st_mode from lstat.
        read_only: Whether the entry carries the read-only attribute.
    """

    path: str
    kind: EntryKind
    mode: int
    read_only: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a traversable directory."""
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of deleting a single path in a batch.

    Attributes:
        path: Path that was operated on.
        success: Whether the requested deletion completed.
        error: Error message if the deletion failed, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None
