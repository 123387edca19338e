import logging
import os
import colorlog
from typing import Dict, Optional

from ..core.config import config

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}

def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.

    Calling it again for the same name replaces the handler instead of stacking
    a second one.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()
    level = LOG_LEVELS.get(log_level, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(
        config.logging.format,
        datefmt=config.logging.date_format,
        log_colors=LOG_COLORS
    ))
    logger.addHandler(console_handler)

    if log_level not in LOG_LEVELS:
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    CONFIGURED_LOGGERS[name] = logger
    return logger

def get_log_level() -> str:
    """Get the log level from the environment, falling back to the configured level."""
    return os.environ.get("LOG_LEVEL", config.logging.level).upper()

def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger namespaced under the package.

    Args:
        name: Component name, e.g. "page_fetcher"
        log_level: The log level; defaults to LOG_LEVEL from the environment

    Returns:
        A configured logger instance
    """
    qualified = name if name.startswith("youtube_transcripts") else f"youtube_transcripts.{name}"
    if qualified in CONFIGURED_LOGGERS and log_level is None:
        return CONFIGURED_LOGGERS[qualified]

    return setup_logger(qualified, log_level or get_log_level())
