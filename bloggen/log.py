"""
Logging setup (loguru).
"""
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO"):
    """
    Replace loguru's default sink with a single stderr sink.

    Args:
        level: minimum level for the console sink

    Returns:
        logger: the configured loguru logger
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)
    return logger
