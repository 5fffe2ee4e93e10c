"""
Package logger.

Modules log through the shared `log` instance:

    from modelpick.utils.logger import log
    log.info(f"Loaded {count} models")

Library use stays silent (NullHandler) until an application calls
setup_logging(), which attaches a rich console handler.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "modelpick"

log = logging.getLogger(LOGGER_NAME)
log.addHandler(logging.NullHandler())


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Safe to call more than once; an existing RichHandler is replaced.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or numeric level
        console: Optional rich Console (defaults to stderr)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level_name = level.upper()
        numeric = logging.getLevelName(level_name)
        if not isinstance(numeric, int):
            log.warning(f"Unknown log level {level!r}, using WARNING")
            numeric = logging.WARNING
        level = numeric

    for handler in list(log.handlers):
        if isinstance(handler, RichHandler):
            log.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(level)
    return log
