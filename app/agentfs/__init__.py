"""agentfs - filesystem primitives for build and automation agents.

Robust recursive directory deletion (read-only entries, links as leaves,
cooperative cancellation) and platform-aware path relativization.
"""

from agentfs.filesystem.cancellation import CancellationToken
from agentfs.filesystem.deleter import TreeDeleter, delete_directory, delete_file
from agentfs.filesystem.errors import CancelledError, DeletionError, FileSystemError
from agentfs.paths.relative import PathStyle, make_relative

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "CancelledError",
    "DeletionError",
    "FileSystemError",
    "PathStyle",
    "TreeDeleter",
    "__version__",
    "delete_directory",
    "delete_file",
    "make_relative",
]
