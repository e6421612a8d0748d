"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from agentfs import __version__
from agentfs.cli.commands import config, relpath, rmtree
from agentfs.utils.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="agentfs",
    help="Filesystem primitives for build agents.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"agentfs version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every deleted entry to stderr.",
        ),
    ] = False,
) -> None:
    """agentfs - robust tree deletion and path relativization."""
    setup_logging(verbose)


# Register commands
app.command(name="rmtree")(rmtree.rmtree)
app.command(name="relpath")(relpath.relpath)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
