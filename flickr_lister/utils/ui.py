"""
User interface utilities for the Flickr lister.
Handles status messages and logging. Standard output is reserved for the
rendered table, so console messages go to stderr.
"""
import sys
import logging
import os
from datetime import datetime
from ..config import config

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

# Lowest level echoed to the console
_console_level = "INFO"
_logger = None


def set_console_level(level):
    """Set the lowest message level printed to the console."""
    global _console_level
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    _console_level = level


def setup_logging():
    """Setup logging to the log file in the cache directory."""
    global _logger
    # Create cache directory if it doesn't exist
    os.makedirs(config.CACHE_DIR, exist_ok=True)

    # Disable flickrapi's verbose logging
    flickr_logger = logging.getLogger('flickrapi')
    flickr_logger.setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(config.log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                                datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger():
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def print_and_log(message, level="INFO"):
    """Print message to stderr and log to file with timestamp."""
    logger = get_logger()
    level = level.upper()

    if LEVELS.get(level, 20) >= LEVELS[_console_level]:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{timestamp} - {message}", file=sys.stderr)

    if level == "ERROR":
        logger.error(message)
    elif level == "WARNING":
        logger.warning(message)
    elif level == "DEBUG":
        logger.debug(message)
    else:
        logger.info(message)
