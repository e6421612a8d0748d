"""Settings commands.

Provides commands to show the effective settings and to write a
default settings file.
"""

from typing import Annotated

import typer
from rich.table import Table

from agentfs.cli.types import require_config
from agentfs.core.config import AgentFsConfig, ConfigError, save_config
from agentfs.core.paths import get_config_path
from agentfs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the agentfs settings file.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings and where they come from."""
    config = require_config()
    config_path = get_config_path()

    source = str(config_path) if config_path.exists() else "defaults (no settings file)"
    table = Table(title="agentfs settings", show_lines=False, header_style="header")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("path_style", config.path_style)
    table.add_row("continue_on_error", str(config.continue_on_error).lower())
    timeout = "-" if config.timeout_seconds is None else f"{config.timeout_seconds:g}s"
    table.add_row("timeout_seconds", timeout)

    console.print(table)
    console.print(f"[dim]Source: {source}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Settings file already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        written = save_config(AgentFsConfig())
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {written}")
