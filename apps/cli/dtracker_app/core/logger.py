"""Logging Configuration

Provides centralized logging setup with automatic log rotation.
Features:
- Time-based rotation (daily)
- Size-based rotation (10MB)
- Console and file outputs
- Consistent formatting
"""

import logging
import sys
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

from .config import settings


def get_logger(name: str = "dtracker") -> logging.Logger:
    """Configure and return a logger instance with rotation support.

    Args:
        name: Logger identifier, defaults to "dtracker"

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)
    logger.propagate = False

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console output on stderr; stdout carries command output.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(settings.LOG_LEVEL)

    size_handler = RotatingFileHandler(
        settings.log_dir_path / "dtracker.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
    )
    size_handler.setFormatter(formatter)
    size_handler.setLevel(settings.LOG_LEVEL)

    time_handler = TimedRotatingFileHandler(
        settings.log_dir_path / "dtracker_daily.log",
        when="midnight",
        interval=1,
        backupCount=30,
    )
    time_handler.setFormatter(formatter)
    time_handler.setLevel(settings.LOG_LEVEL)

    logger.addHandler(console_handler)
    logger.addHandler(size_handler)
    logger.addHandler(time_handler)

    return logger
