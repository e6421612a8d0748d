"""Relative path command."""

from typing import Annotated

import typer

from agentfs.cli.types import require_config
from agentfs.paths.relative import PathStyle, make_relative


def relpath(
    target: Annotated[str, typer.Argument(help="Path to express relative to BASE.")],
    base: Annotated[str, typer.Argument(help="Ancestor directory.")],
    style: Annotated[
        PathStyle | None,
        typer.Option(
            "--style",
            "-s",
            help="Path convention (default: from config, else the platform's).",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Print TARGET relative to BASE, or TARGET unchanged if BASE is not an ancestor.

    Examples:
        agentfs relpath /user/src/project/foo.cpp /user/src
        agentfs relpath 'd:\\src\\foo.cpp' 'd:\\src' --style windows
    """
    effective = style if style is not None else require_config().style
    typer.echo(make_relative(target, base, effective))
