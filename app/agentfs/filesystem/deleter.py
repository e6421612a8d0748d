"""Recursive directory deletion.

Removes directory trees depth-first, clearing read-only attributes entry
by entry, treating links as leaves, and polling a cancellation token
between steps. Either the whole tree is gone when the call returns, or a
DeletionError / CancelledError names the path where it stopped.
"""

import logging
import os
from collections.abc import Iterator

from agentfs.filesystem.access import FileSystemAccess, LocalFileSystem
from agentfs.filesystem.cancellation import CancellationToken
from agentfs.filesystem.errors import CancelledError, DeletionError
from agentfs.filesystem.models import DeletionResult, Entry, EntryKind

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


class TreeDeleter:
    """Deletes directory trees and files through a FileSystemAccess back end.

    The deleter is stateless between calls; a single instance may be
    reused for any number of deletions.

    Attributes:
        _fs: Filesystem back end used for every inspection and removal.
        _continue_on_content_error: If True, failures below the root are
            logged and skipped instead of aborting the traversal.
    """

    def __init__(
        self,
        fs: FileSystemAccess | None = None,
        *,
        continue_on_content_error: bool = False,
    ) -> None:
        """Initialize the TreeDeleter.

        Args:
            fs: Filesystem back end. Defaults to the local filesystem.
            continue_on_content_error: Keep going when an entry below the
                root cannot be deleted. The root itself still raises.
        """
        self._fs = fs or LocalFileSystem()
        self._continue_on_content_error = continue_on_content_error

    def delete_directory(
        self,
        path: PathArg,
        cancel: CancellationToken | None = None,
        *,
        contents_only: bool = False,
    ) -> None:
        """Delete a directory and everything below it.

        A path that does not exist is already deleted, so the call returns
        without error. A link at path is removed without touching its target.

        Args:
            path: Directory to delete.
            cancel: Token polled before each step. None means never cancelled.
            contents_only: Delete everything below path but keep path itself.

        Raises:
            ValueError: If path is empty.
            DeletionError: If an entry cannot be removed, or path is a file.
            CancelledError: If cancellation was requested before completion.
        """
        path_str = _require_path(path)
        cancel = cancel or CancellationToken()

        root = self._stat(path_str)
        if root is None:
            logger.debug("Nothing to delete, path does not exist: %s", path_str)
            return

        if root.kind is EntryKind.FILE:
            raise DeletionError(path_str, NotADirectoryError(f"Not a directory: {path_str}"))

        if root.kind is EntryKind.LINK:
            if contents_only:
                logger.debug("Leaving link root untouched for contents-only deletion: %s", path_str)
                return
            self._check_cancelled(cancel, path_str)
            self._delete_entry(root)
            return

        self._delete_tree(root, cancel, delete_self=not contents_only)
        logger.debug("Deleted directory %s (contents_only=%s)", path_str, contents_only)

    def delete_file(self, path: PathArg) -> None:
        """Delete a single file or link, clearing its read-only attribute first.

        Args:
            path: File to delete. A missing path is a no-op.

        Raises:
            ValueError: If path is empty.
            DeletionError: If the file cannot be removed or path is a directory.
        """
        path_str = _require_path(path)

        entry = self._stat(path_str)
        if entry is None:
            logger.debug("Nothing to delete, path does not exist: %s", path_str)
            return

        if entry.is_directory:
            raise DeletionError(path_str, IsADirectoryError(f"Is a directory: {path_str}"))

        self._delete_entry(entry)

    def delete_many(
        self,
        paths: list[str],
        cancel: CancellationToken | None = None,
        *,
        contents_only: bool = False,
    ) -> list[DeletionResult]:
        """Delete multiple paths and return one result per path.

        Directories are deleted recursively, files and links directly.
        A failure on one path does not stop the others; cancellation does.

        Args:
            paths: Paths to delete.
            cancel: Token shared by every deletion in the batch.
            contents_only: Empty each directory but keep it. Paths that
                are not directories are reported as failures.

        Returns:
            List of DeletionResult in input order.

        Raises:
            CancelledError: If cancellation was requested during the batch.
        """
        cancel = cancel or CancellationToken()
        results: list[DeletionResult] = []

        for path in paths:
            try:
                entry = self._stat(_require_path(path))
                if entry is not None and (entry.is_directory or contents_only):
                    self.delete_directory(path, cancel, contents_only=contents_only)
                else:
                    self._check_cancelled(cancel, path)
                    self.delete_file(path)
            except (ValueError, DeletionError) as e:
                logger.warning("Deletion failed for %s: %s", path, e)
                results.append(DeletionResult(path=path, success=False, error=str(e)))
                continue
            results.append(DeletionResult(path=path, success=True))

        return results

    # === Traversal ===

    def _delete_tree(
        self,
        directory: Entry,
        cancel: CancellationToken,
        *,
        delete_self: bool,
    ) -> None:
        """Empty a directory depth-first, then remove it if requested.

        Walks with an explicit stack of open directories, so tree depth is
        bounded by the filesystem rather than the interpreter's recursion
        limit. Each directory is entered once (made writable and listed)
        and removed after its last child.
        """
        stack = [self._enter(directory, cancel, delete_self=delete_self)]

        while stack:
            current, children, remove = stack[-1]
            child = next(children, None)

            if child is None:
                stack.pop()
                if remove:
                    self._check_cancelled(cancel, current.path)
                    try:
                        self._delete_entry(current)
                    except DeletionError as e:
                        # The root always raises; only content may be skipped.
                        if not stack or not self._continue_on_content_error:
                            raise
                        logger.warning("Skipping entry that could not be deleted: %s", e)
                continue

            self._check_cancelled(cancel, child.path)
            try:
                if child.is_directory:
                    stack.append(self._enter(child, cancel, delete_self=True))
                else:
                    self._delete_entry(child)
            except DeletionError as e:
                if not self._continue_on_content_error:
                    raise
                logger.warning("Skipping entry that could not be deleted: %s", e)

    def _enter(
        self,
        directory: Entry,
        cancel: CancellationToken,
        *,
        delete_self: bool,
    ) -> tuple[Entry, Iterator[Entry], bool]:
        """Make a directory writable and list it for traversal."""
        self._check_cancelled(cancel, directory.path)
        # A directory's own write bit governs removal of its children.
        directory = self._make_writable(directory)
        return directory, iter(self._list(directory)), delete_self

    def _delete_entry(self, entry: Entry) -> None:
        """Clear the read-only attribute if set, then remove the entry."""
        entry = self._make_writable(entry)
        try:
            self._fs.delete(entry)
        except OSError as e:
            raise DeletionError(entry.path, e) from e
        logger.debug("Deleted %s %s", entry.kind.value, entry.path)

    def _make_writable(self, entry: Entry) -> Entry:
        """Return the entry with its read-only attribute cleared."""
        if not self._fs.is_read_only(entry):
            return entry
        try:
            self._fs.clear_read_only(entry)
        except OSError as e:
            raise DeletionError(entry.path, e) from e
        logger.debug("Cleared read-only attribute on %s", entry.path)
        return Entry(path=entry.path, kind=entry.kind, mode=entry.mode, read_only=False)

    def _list(self, directory: Entry) -> list[Entry]:
        try:
            return self._fs.list_children(directory)
        except OSError as e:
            raise DeletionError(directory.path, e) from e

    def _stat(self, path: str) -> Entry | None:
        try:
            return self._fs.stat(path)
        except OSError as e:
            raise DeletionError(path, e) from e

    @staticmethod
    def _check_cancelled(cancel: CancellationToken, path: str) -> None:
        if cancel.is_cancelled:
            logger.debug("Cancellation requested, stopping at %s", path)
            raise CancelledError(path)


def _require_path(path: PathArg) -> str:
    """Convert a path argument to a non-empty string.

    Raises:
        ValueError: If the path is empty.
    """
    path_str = os.fspath(path)
    if not path_str:
        msg = "Path cannot be empty"
        raise ValueError(msg)
    return path_str


def delete_directory(
    path: PathArg,
    cancel: CancellationToken | None = None,
    *,
    contents_only: bool = False,
) -> None:
    """Delete a directory tree on the local filesystem.

    See TreeDeleter.delete_directory.
    """
    TreeDeleter().delete_directory(path, cancel, contents_only=contents_only)


def delete_file(path: PathArg) -> None:
    """Delete a single file on the local filesystem.

    See TreeDeleter.delete_file.
    """
    TreeDeleter().delete_file(path)
