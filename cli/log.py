"""
Logging setup for the command line.

Library modules only create loggers; the CLI attaches a single Rich
handler to the ``miditrack`` logger. Calling ``configure_logging`` again
replaces the handler instead of stacking a second one.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_TAG = "_miditrack_cli_handler"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Route ``miditrack`` log records to stderr through Rich.

    Args:
        verbose: Show DEBUG/INFO records instead of warnings only

    Returns:
        The configured ``miditrack`` logger
    """
    logger = logging.getLogger("miditrack")

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=verbose,
        rich_tracebacks=True,
    )
    setattr(handler, _HANDLER_TAG, True)

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
