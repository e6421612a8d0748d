"""Filesystem deletion module.

This module provides the filesystem access layer, cancellation token,
error types, and the recursive tree deleter.
"""

from agentfs.filesystem.access import FileSystemAccess, LocalFileSystem
from agentfs.filesystem.cancellation import CancellationToken
from agentfs.filesystem.deleter import TreeDeleter, delete_directory, delete_file
from agentfs.filesystem.errors import CancelledError, DeletionError, FileSystemError
from agentfs.filesystem.models import DeletionResult, Entry, EntryKind

__all__ = [
    "CancellationToken",
    "CancelledError",
    "DeletionError",
    "DeletionResult",
    "Entry",
    "EntryKind",
    "FileSystemAccess",
    "FileSystemError",
    "LocalFileSystem",
    "TreeDeleter",
    "delete_directory",
    "delete_file",
]
