#!/usr/bin/env python3
# ABOUTME: Logging setup for the command-line tool.
# ABOUTME: Routes log records through rich, honoring the LOG_LEVEL variable.

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from translingo.config import LOG_LEVEL_ENV_VAR

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(verbose: bool = False) -> int:
    """Pick the log level from LOG_LEVEL, lowered to INFO in verbose mode.

    Unknown level names fall back to WARNING.
    """
    name = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose:
        level = min(level, logging.INFO)
    return level


def setup_logging(verbose: bool = False) -> None:
    """Configure the translingo logger to write through a RichHandler on stderr."""
    handler = RichHandler(
        console=Console(stderr=True), show_path=False, markup=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("translingo")
    logger.handlers = [handler]
    logger.setLevel(resolve_log_level(verbose))
    logger.propagate = False
