# File: weekly_scheduler/utils/logger.py
"""
Centralized logging configuration for the weekly scheduler.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

LOGS_DIR = Path(__file__).parent.parent.parent / "logs"


def _log_to_file() -> bool:
    return os.getenv("LOG_TO_FILE", "1").lower() not in ("0", "false", "no", "off")


def _default_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logger(name: str = "weekly_scheduler", level: int = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Logging level (default: LOG_LEVEL env var, else INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if level is None:
        level = _default_level()
    logger.setLevel(logging.DEBUG if _log_to_file() else level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler for persistent logs
    if _log_to_file():
        LOGS_DIR.mkdir(exist_ok=True)
        log_file = LOGS_DIR / f"weekly_scheduler_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        # More detailed format for file
        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
