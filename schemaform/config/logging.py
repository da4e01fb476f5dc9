"""
Logging - Rich console logging for the command-line interface.

Library code never configures handlers; it only logs through
``logging.getLogger(__name__)`` or the logger carried by the analysis context.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """
    Install a Rich handler on the package logger.

    Calling it again replaces the previous handler instead of stacking a new one.

    Args:
        level: Level name, case-insensitive; unknown names fall back to INFO
        console: Console to write to (defaults to stderr)

    Returns:
        The configured ``schemaform`` logger
    """
    log_level = LOG_LEVEL_MAP.get(level.upper(), logging.INFO)
    logger = logging.getLogger("schemaform")

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger
