"""
Logging Setup
Configures loguru sinks for the command line tools
"""

import os
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Replace loguru's default sink with the tooling's format

    Args:
        level: Console level (defaults to $LOG_LEVEL, then INFO)
        log_file: Optional DEBUG log file (defaults to $LOG_FILE)
    """
    level = level or os.getenv('LOG_LEVEL', 'INFO')
    log_file = log_file or os.getenv('LOG_FILE')

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG"
        )
