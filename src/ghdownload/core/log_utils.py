"""Logging setup for gh-download."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ghdownload"
LOG_LEVEL_ENV_VAR = "GH_DOWNLOAD_LOG_LEVEL"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(verbose: bool = False) -> None:
    """Attach a stderr RichHandler to the package logger.

    The level is WARNING, DEBUG when ``verbose`` is set, and
    GH_DOWNLOAD_LOG_LEVEL wins over both when it names a valid level.
    Calling this again only updates the level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        resolved = logging.getLevelName(env_level.upper())
        if isinstance(resolved, int):
            level = resolved

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
