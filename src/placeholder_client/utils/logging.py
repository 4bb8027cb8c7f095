"""
Logging configuration for the placeholder client.

This module sets up structured logging using loguru with appropriate
formatting and levels for both interactive and batch use.
"""

import sys
from typing import Optional

from loguru import logger

from ..config import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR)
    """
    settings = get_settings()

    # Remove default handler
    logger.remove()

    level = (log_level or settings.log_level).upper()
    serialize = settings.log_format == "json"

    format_string = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=not serialize,
        serialize=serialize,
        backtrace=settings.debug_mode,
        diagnose=settings.debug_mode
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            format=format_string,
            level=level,
            serialize=serialize,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            backtrace=False,
            diagnose=False
        )

    logger.info(f"Logging initialized with level: {level}, format: {settings.log_format}")
