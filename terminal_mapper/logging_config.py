"""Loguru setup for the terminal mapper."""

import sys
from typing import Optional

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure loguru sinks.
    
    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path of a rotating debug log
        
    Returns:
        The configured logger
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    
    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            rotation="5 MB",
            retention="7 days",
            enqueue=True,
        )
    
    return logger
