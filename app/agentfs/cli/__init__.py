"""CLI package for agentfs.

This package contains the Typer application and all subcommands.
"""

from agentfs.cli.main import app

__all__ = ["app"]
