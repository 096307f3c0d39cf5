"""loguru sink setup for the CLI. Library code just imports `logger`."""

import sys

from loguru import logger

LOG_FORMAT = '<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {name}:{function} - {message}'


def configure_logging(level: str = 'WARNING') -> None:
    """Replace loguru's default sink with a single stderr sink at level."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
