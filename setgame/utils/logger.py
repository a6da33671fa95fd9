"""Logging setup for applications embedding the game core."""

import logging
import sys
from pathlib import Path

from setgame.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str | LoggingConfig = "INFO",
    log_file: Path | str | None = None,
) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR), or a
            LoggingConfig supplying both level and log file
        log_file: Optional file that receives the same records as stdout
    """
    if isinstance(level, LoggingConfig):
        log_file = log_file or level.log_file
        level = level.level

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
