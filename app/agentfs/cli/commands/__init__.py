"""CLI commands for agentfs.

This package contains all subcommand implementations.
"""

from agentfs.cli.commands import config, relpath, rmtree

__all__ = ["config", "relpath", "rmtree"]
