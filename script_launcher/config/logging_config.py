"""
Logging Configuration for the Script Launcher

Provides:
- Timestamps
- Log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Console handler on stderr (stdout belongs to the dispatched script)
- Optional size-rotated log file
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = "WARNING"


def parse_level(name: Optional[str]) -> int:
    """Convert a level name like 'debug' to its logging constant (WARNING if unknown)."""
    level = logging.getLevelName((name or DEFAULT_LEVEL).upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(
    name: str,
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
) -> logging.Logger:
    """
    Setup a logger with console and optional file handlers.

    Args:
        name: Logger name (typically the package name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path; no file logging when omitted
        console: Whether to log to the console (stderr)
        detailed: Whether to use detailed format (includes file/line)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("script_launcher", level=logging.DEBUG)
        >>> logger.debug("Network 'sepolia' is remote")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_launcher_logger(level_name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, configured from LAUNCHER_LOG_LEVEL / LAUNCHER_LOG_FILE."""
    level = parse_level(level_name or os.getenv("LAUNCHER_LOG_LEVEL"))
    return setup_logger(
        "script_launcher",
        level=level,
        log_file=os.getenv("LAUNCHER_LOG_FILE"),
        detailed=level <= logging.DEBUG,
    )
