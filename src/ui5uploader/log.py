"""Logging setup for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """
    Route the package loggers through a rich handler on stderr.

    Args:
        verbose: Log DEBUG messages instead of warnings only
        console: Console to log to (a stderr console by default)
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("ui5uploader")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module of this package."""
    return logging.getLogger(name)
