"""
Logging configuration for Watermark manager
"""
import logging
import sys
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Send diagnostics to stderr so they never mix with the prompts on stdout"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("watermark_manager")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
