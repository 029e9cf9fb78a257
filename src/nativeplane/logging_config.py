"""
Logging Configuration
Attaches handlers to the package logger. The library itself only creates
module loggers; applications call ``setup_logging`` once at startup.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Routes the 'nativeplane' logger (tool messages, frame changes) to stdout
    and, optionally, to a file.

    Args:
        level: Logging level for the logger and every handler.
        log_file: Optional path of a log file, overwritten on each call.
    """
    logger = logging.getLogger("nativeplane")
    logger.setLevel(level)

    # Replace handlers from an earlier call
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
