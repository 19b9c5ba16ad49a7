"""Logging configuration for applications embedding the token library.

The library only logs through module loggers; applications call
setup_logging() once at startup to route those records to stdout.
"""

import logging
import sys

import config


def setup_logging(level: str | None = None) -> None:
    """
    Configure logging.

    Args:
        level: Logging level (default: settings.LOG_LEVEL)
    """
    level = level or config.settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
