"""
Logging Setup
Configures loguru sinks for deployment entry points
"""

import sys
from typing import Optional

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Replace loguru's default sink

    Args:
        level: Console level (stderr); unknown names fall back to INFO
        log_file: Optional log file, rotated daily and kept for a week
    """
    requested = (level or "INFO").upper()
    try:
        logger.level(requested)
        console_level = requested
    except ValueError:
        console_level = "INFO"

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=console_level
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )

    if console_level != requested:
        logger.warning(f"Unknown LOG_LEVEL '{level}', using INFO")
