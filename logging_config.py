"""
Logging Configuration
Sets up the loggers of the solver packages.
"""
import logging
import sys
from typing import Optional

from config import LOG_DATEFMT, LOG_FORMAT, LOGGER_NAMESPACES


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers of every top-level solver package.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # avoid duplicate records when the menu is restarted
        if logger.hasHandlers():
            logger.handlers.clear()

        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)
        logger.propagate = False

    logging.getLogger("cli").info("Logging initialized.")
