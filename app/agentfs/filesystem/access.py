"""Filesystem access layer used by the tree deleter.

This module defines the FileSystemAccess interface the deletion
algorithm is written against, and LocalFileSystem, the implementation
backed by the operating system. Everything is based on lstat so that
links are reported as links and never followed.
"""

import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path

from agentfs.filesystem.models import Entry, EntryKind

# Windows reports junctions and other reparse points through st_file_attributes.
FILE_ATTRIBUTE_REPARSE_POINT = getattr(stat, "FILE_ATTRIBUTE_REPARSE_POINT", 0x400)

# Bits restored when a directory is made writable so it can be listed and emptied.
_DIRECTORY_OWNER_BITS = stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR


class FileSystemAccess(ABC):
    """Abstract capability interface over a filesystem back end.

    Example:
        >>> fs = LocalFileSystem()
        >>> root = fs.stat("/tmp/build")
        >>> if root is not None:
        ...     for child in fs.list_children(root):
        ...         print(child.kind, child.path)
    """

    @abstractmethod
    def stat(self, path: str) -> Entry | None:
        """Describe the entry at path without following links.

        Returns:
            Entry for the path, or None if nothing exists there.

        Raises:
            OSError: If the entry exists but cannot be inspected.
        """

    @abstractmethod
    def list_children(self, entry: Entry) -> list[Entry]:
        """List the immediate children of a directory entry.

        Raises:
            OSError: If the directory cannot be read.
        """

    def is_read_only(self, entry: Entry) -> bool:
        """Check if the entry carries the read-only attribute."""
        return entry.read_only

    @abstractmethod
    def clear_read_only(self, entry: Entry) -> None:
        """Remove the read-only attribute from the entry.

        Raises:
            OSError: If the attribute cannot be changed.
        """

    @abstractmethod
    def delete(self, entry: Entry) -> None:
        """Delete a file, a link, or an empty directory.

        Raises:
            OSError: If the entry cannot be removed.
        """


class LocalFileSystem(FileSystemAccess):
    """FileSystemAccess implementation for the local operating system."""

    def stat(self, path: str) -> Entry | None:
        try:
            st = os.lstat(path)
        except FileNotFoundError:
            return None
        return _entry_from_stat(path, st)

    def list_children(self, entry: Entry) -> list[Entry]:
        # Materialize the listing before anything in the directory is removed.
        return [_entry_from_stat(str(child), child.lstat()) for child in Path(entry.path).iterdir()]

    def clear_read_only(self, entry: Entry) -> None:
        if entry.kind is EntryKind.DIRECTORY:
            os.chmod(entry.path, stat.S_IMODE(entry.mode) | _DIRECTORY_OWNER_BITS)
        elif entry.kind is EntryKind.FILE:
            os.chmod(entry.path, stat.S_IMODE(entry.mode) | stat.S_IWUSR)
        elif os.chmod in os.supports_follow_symlinks:
            os.chmod(entry.path, stat.S_IMODE(entry.mode) | stat.S_IWUSR, follow_symlinks=False)
        # Otherwise the platform cannot change a link's own mode, and link
        # permissions never block removal there.

    def delete(self, entry: Entry) -> None:
        if entry.kind is EntryKind.DIRECTORY:
            os.rmdir(entry.path)
        elif entry.kind is EntryKind.LINK and os.name == "nt" and stat.S_ISDIR(entry.mode):
            # Directory symlinks and junctions are removed with rmdir on Windows.
            os.rmdir(entry.path)
        else:
            os.unlink(entry.path)


def _entry_from_stat(path: str, st: os.stat_result) -> Entry:
    """Build an Entry from an lstat result.

    Args:
        path: Path that was inspected.
        st: Result of os.lstat for the path.

    Returns:
        Entry describing the path.
    """
    attributes = getattr(st, "st_file_attributes", 0)
    if stat.S_ISLNK(st.st_mode) or attributes & FILE_ATTRIBUTE_REPARSE_POINT:
        kind = EntryKind.LINK
        # POSIX link modes are always 0o777; only Windows can mark a link read-only.
        read_only = os.name == "nt" and not st.st_mode & stat.S_IWUSR
    elif stat.S_ISDIR(st.st_mode):
        kind = EntryKind.DIRECTORY
        read_only = st.st_mode & _DIRECTORY_OWNER_BITS != _DIRECTORY_OWNER_BITS
    else:
        kind = EntryKind.FILE
        read_only = not st.st_mode & stat.S_IWUSR
    return Entry(path=path, kind=kind, mode=st.st_mode, read_only=bool(read_only))
