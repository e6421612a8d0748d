"""DevOps tasks for agentfs.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys
from pathlib import Path

from agentfs import delete_directory, delete_file

CACHE_DIRS = (".pytest_cache", ".ruff_cache", ".mypy_cache", "build", "dist")


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    _run(
        [
            ["ruff", "format", "."],
            ["ruff", "check", "--fix", "."],
        ]
    )


def test() -> None:
    """Run tests with PyTest."""
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Remove caches and build artifacts with agentfs itself."""
    root = Path(__file__).parent
    for name in CACHE_DIRS:
        delete_directory(root / name)
    for pycache in list(root.rglob("__pycache__")):
        delete_directory(pycache)
    for pyc in list(root.rglob("*.pyc")):
        delete_file(pyc)
    for egg_info in list(root.rglob("*.egg-info")):
        delete_directory(egg_info)
    print("Caches and artifacts removed.")


TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
