"""
Logging Configuration
Diagnostics go to stderr (and optionally a log file); stdout is reserved for the result line
"""

import os
import sys
from typing import Optional
from loguru import logger

DEFAULT_LOG_FILE = "data/logs/deploy.log"


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure loguru sinks

    Args:
        level: stderr log level (default: $DEPLOY_LOG_LEVEL or INFO)
        log_file: File sink path (default: $DEPLOY_LOG_FILE or data/logs/deploy.log;
            empty string disables the file sink)
    """
    level = level or os.getenv('DEPLOY_LOG_LEVEL', 'INFO')
    if log_file is None:
        log_file = os.getenv('DEPLOY_LOG_FILE', DEFAULT_LOG_FILE)

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )
