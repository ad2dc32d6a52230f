"""
Logging Configuration Module for the Binance Futures REST client.

This module provides a centralized logging setup that all other modules
import and use. Logs are written to stderr and, when LOG_FILE is set,
to a log file for post-run analysis.

Usage in other modules:
    from binance_fapi.logger_setup import setup_logger
    logger = setup_logger(__name__)
    logger.debug("GET /fapi/v1/depth")
    logger.error("Request failed", exc_info=True)
"""

import logging
import sys

from binance_fapi.config import LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT


def setup_logger(name: str) -> logging.Logger:
    """
    Create and configure a logger with console and file handlers.

    This function sets up a logger that outputs to:
    1. Console (stderr) - INFO and above, keeping stdout for command output
    2. LOG_FILE         - DEBUG and above, including every request line

    Args:
        name: The name for the logger, typically __name__ of the calling module.

    Returns:
        A configured logging.Logger instance ready for use.

    Example:
        >>> logger = setup_logger("binance_fapi.session")
        >>> logger.info("Session ready")
        2024-01-15 10:30:00 - binance_fapi.session - INFO - Session ready
    """
    logger = logging.getLogger(name)

    # Only add handlers once, so repeated imports don't duplicate output.
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if LOG_FILE:
            file_handler = logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
