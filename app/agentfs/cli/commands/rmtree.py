"""Directory tree deletion command.

Deletes directories (and stray files) recursively, including entries
marked read-only, and reports the outcome per path.
"""

from typing import Annotated

import typer

from agentfs.cli.types import require_config
from agentfs.filesystem.cancellation import CancellationToken
from agentfs.filesystem.deleter import TreeDeleter
from agentfs.filesystem.errors import CancelledError
from agentfs.utils.formatting import (
    console,
    create_results_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

# Conventional exit status for an interrupted run
EXIT_CANCELLED = 130


def rmtree(
    paths: Annotated[
        list[str],
        typer.Argument(help="Directories or files to delete."),
    ],
    contents_only: Annotated[
        bool,
        typer.Option("--contents-only", help="Empty each directory but keep it."),
    ] = False,
    keep_going: Annotated[
        bool | None,
        typer.Option(
            "--keep-going/--stop-on-error",
            help="Skip entries that cannot be deleted instead of stopping.",
            show_default=False,
        ),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option(
            "--timeout",
            "-t",
            min=0,
            help="Cancel the deletion after this many seconds.",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete directory trees, clearing read-only attributes as needed.

    Examples:
        agentfs rmtree build/ -y
        agentfs rmtree _work/1 --contents-only --keep-going
    """
    config = require_config()
    continue_on_error = config.continue_on_error if keep_going is None else keep_going
    timeout_seconds = config.timeout_seconds if timeout is None else timeout

    if not yes:
        action = "Empty" if contents_only else "Delete"
        confirmed = typer.confirm(
            f"{action} {len(paths)} path(s) and everything below them?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    deleter = TreeDeleter(continue_on_content_error=continue_on_error)
    cancel = CancellationToken(timeout=timeout_seconds)

    try:
        results = deleter.delete_many(paths, cancel, contents_only=contents_only)
    except CancelledError as e:
        print_error(str(e))
        print_warning("Target may be partially deleted.")
        raise typer.Exit(code=EXIT_CANCELLED) from e

    console.print(create_results_table(results))

    fail_count = sum(1 for r in results if not r.success)
    if fail_count:
        print_warning(f"{len(results) - fail_count} succeeded, {fail_count} failed")
        raise typer.Exit(code=1)

    print_success(f"All {len(results)} path(s) deleted.")
