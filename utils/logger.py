# -*- coding: utf-8 -*-
"""
Logging configuration for Template Studio.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "template_studio"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger(log_to_file: bool = True, console_level: int = logging.INFO) -> logging.Logger:
    """
    Setup the application logger.

    The file handler rotates at Config.LOG_MAX_BYTES and keeps
    Config.LOG_BACKUP_COUNT backups. The console handler only shows
    console_level and above.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    if log_to_file:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.

    Modules call this at import time, so no handlers are attached here;
    records propagate to whatever setup_logger() installed (or to the
    root logger, which is what pytest's caplog captures).
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)

    return _logger.getChild(name)
