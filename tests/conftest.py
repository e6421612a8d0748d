"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest
from fakes import FakeFileSystem


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Empty in-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def make_read_only() -> Callable[[Path], None]:
    """Strip write permission from a real path (the read-only attribute on Windows)."""

    def _make_read_only(path: Path) -> None:
        mode = stat.S_IMODE(os.lstat(path).st_mode)
        os.chmod(path, mode & ~(stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH))

    return _make_read_only
