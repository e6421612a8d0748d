"""Path relativization policies."""

from agentfs.paths.relative import (
    DriveLetterPolicy,
    PathStyle,
    RelativePathPolicy,
    SingleRootPolicy,
    get_policy,
    make_relative,
)

__all__ = [
    "DriveLetterPolicy",
    "PathStyle",
    "RelativePathPolicy",
    "SingleRootPolicy",
    "get_policy",
    "make_relative",
]
