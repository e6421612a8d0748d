"""Shared helpers for CLI commands."""

import typer

from agentfs.core.config import AgentFsConfig, ConfigError, load_config_or_default
from agentfs.utils.formatting import print_error


def require_config() -> AgentFsConfig:
    """Load settings for a command, exiting with code 1 if the file is invalid.

    Returns:
        The configured settings, or defaults when no settings file exists.

    Raises:
        typer.Exit: If the settings file exists but cannot be used.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
