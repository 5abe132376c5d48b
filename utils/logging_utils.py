import sys
from typing import Optional

from loguru import logger

from utils import config


def configure_logging(level: Optional[str] = None) -> int:
    """
    Route loguru output to a single stderr sink; return its handler id.

    stdout carries the MCP stdio transport, so nothing may be logged there.
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level=(level or config.LOG_LEVEL).upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        backtrace=False,
        diagnose=False,
    )
