"""Loguru setup for the combined data service."""

import sys
from typing import Optional, Union

from loguru import logger

from ..config import LogLevel, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(log_level: Optional[Union[LogLevel, str]] = None) -> None:
    """
    Replace loguru's default sink with the service's sinks.

    Logs go to stderr, plus a daily-rotated file when ``log_file`` is set.

    Raises:
        ValueError: If ``log_level`` is not a known level
    """
    settings = get_settings()
    level = settings.log_level if log_level is None else LogLevel(log_level.upper())

    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level.value,
        backtrace=settings.debug_mode,
        diagnose=settings.debug_mode,
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            format=LOG_FORMAT,
            level=level.value,
            rotation="1 day",
            retention="30 days",
            compression="gz",
        )

    logger.debug(f"Logging initialized with level: {level.value}")
