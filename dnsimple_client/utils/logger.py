"""
Centralized logging configuration with colored output
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOGS_DIR = Path("logs")
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LEVEL = "WARNING"


def resolve_level(level: Optional[str] = None) -> str:
    """
    Resolve a logging level name.

    Falls back to the DNSIMPLE_LOG_LEVEL environment variable, then WARNING.

    Raises:
        ValueError: If the level name is not valid
    """
    level = (level or os.environ.get("DNSIMPLE_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    if level not in VALID_LEVELS:
        raise ValueError(f"log level must be one of {VALID_LEVELS}")
    return level


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to console

    Returns:
        Configured logger instance
    """
    level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if console:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level))

        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            secondary_log_colors={},
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with default configuration.

    A log file is only written when DNSIMPLE_LOG_FILE is set.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level

    Returns:
        Configured logger instance
    """
    return setup_logger(
        name=name,
        level=level,
        log_file=os.environ.get("DNSIMPLE_LOG_FILE") or None,
        console=True
    )
