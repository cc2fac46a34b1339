"""Logging configuration for autochat."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "autochat"


def configure_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Install a Rich console handler on the package logger.

    Safe to call more than once; previous handlers are replaced.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        console: Optional Rich console to log to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    # Transport libraries are chatty at DEBUG
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
