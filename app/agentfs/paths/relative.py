"""Relative path computation.

Expresses a target path relative to a base path when the base is an
ancestor of the target at a path-segment boundary. Two policies exist,
one for drive-letter filesystems (Windows) and one for single-root
filesystems (POSIX); both are pure string functions and never touch the
disk.

Examples (POSIX):
    make_relative("/user/src/project/foo.cpp", "/user/src")       -> "project/foo.cpp"
    make_relative("/user/src/project/foo.cpp", "/user/src/proj")  -> unchanged
    make_relative("/user/src", "/user/src")                       -> ""
"""

import os
from abc import ABC
from enum import Enum


class PathStyle(str, Enum):
    """Path convention used to relativize paths.

    Attributes:
        AUTO: Follow the convention of the running platform.
        WINDOWS: Drive letters, backslash separator, forward slash accepted.
        POSIX: Single root, forward slash separator.
    """

    AUTO = "auto"
    WINDOWS = "windows"
    POSIX = "posix"


class RelativePathPolicy(ABC):
    """Relativization rules for one path convention.

    Subclasses set the canonical separator and the alternate separators
    folded into it before comparison.

    Attributes:
        separator: Canonical separator used for comparison and output.
        alt_separators: Separators treated as equivalent to the canonical one.
        case_sensitive: Whether segment comparison honours case.
    """

    separator: str = "/"
    alt_separators: tuple[str, ...] = ()
    case_sensitive: bool = False

    def make_relative(self, target_path: str, base_path: str) -> str:
        """Express target_path relative to base_path.

        Args:
            target_path: Path to relativize.
            base_path: Candidate ancestor of target_path.

        Returns:
            "" if both name the same location, the remainder of the target
            after the base and one separator if the base is an ancestor, and
            target_path exactly as given otherwise.
        """
        target = self.split(target_path)
        base = self.split(base_path)

        # A trailing separator on the base ("d:\", "/user/") names the same directory.
        if len(base) > 1 and base[-1] == "":
            base = base[:-1]

        if len(target) < len(base):
            return target_path

        for target_segment, base_segment in zip(target, base):
            if not self.segments_equal(target_segment, base_segment):
                return target_path

        remainder = target[len(base):]
        if remainder == [""]:
            # Target is the base plus a trailing separator.
            return ""
        return self.separator.join(remainder)

    def normalize(self, path: str) -> str:
        """Fold alternate separators into the canonical separator."""
        for alt in self.alt_separators:
            path = path.replace(alt, self.separator)
        return path

    def split(self, path: str) -> list[str]:
        """Split a path into segments on the canonical separator."""
        return self.normalize(path).split(self.separator)

    def segments_equal(self, left: str, right: str) -> bool:
        """Compare two path segments under this policy's case rules.

        Case is ignored one character at a time, so folds that change a
        segment's length ("ß" vs "SS") never match.
        """
        if self.case_sensitive:
            return left == right
        return len(left) == len(right) and all(
            a == b or a.lower() == b.lower() for a, b in zip(left, right)
        )


class DriveLetterPolicy(RelativePathPolicy):
    """Windows paths: drive letters, case-insensitive, either slash accepted."""

    separator = "\\"
    alt_separators = ("/",)


class SingleRootPolicy(RelativePathPolicy):
    """POSIX paths: one root, forward slash only.

    Backslash is an ordinary filename character here and is never folded.
    """

    separator = "/"


_POLICIES: dict[PathStyle, RelativePathPolicy] = {
    PathStyle.WINDOWS: DriveLetterPolicy(),
    PathStyle.POSIX: SingleRootPolicy(),
}


def get_policy(style: PathStyle = PathStyle.AUTO) -> RelativePathPolicy:
    """Get the relativization policy for a path style.

    Args:
        style: Path style. AUTO selects by the running platform.

    Returns:
        Shared, stateless policy instance.
    """
    if style is PathStyle.AUTO:
        style = PathStyle.WINDOWS if os.sep == "\\" else PathStyle.POSIX
    return _POLICIES[style]


def make_relative(target_path: str, base_path: str, style: PathStyle = PathStyle.AUTO) -> str:
    """Express target_path relative to base_path.

    Args:
        target_path: Path to relativize.
        base_path: Candidate ancestor directory.
        style: Path convention. Defaults to the running platform's.

    Returns:
        The relative path, "" for equal paths, or target_path unchanged when
        base_path is not an ancestor of it.
    """
    return get_policy(style).make_relative(target_path, base_path)
