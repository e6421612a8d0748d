"""Logging setup for the command line.

The library modules only create loggers; handlers are installed here,
once, when the CLI starts.
"""

import logging

from rich.logging import RichHandler

from agentfs.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> None:
    """Route agentfs log records to stderr through Rich.

    Args:
        verbose: Emit debug records (every cleared attribute and deleted
            entry) instead of warnings only.
    """
    logger = logging.getLogger("agentfs")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
