"""Logging configuration for the application."""

import logging
import sys
import os
from typing import Optional

import config

LOGGER_NAME = "ChatGrader"

_logger: Optional[logging.Logger] = None

def setup_logger() -> logging.Logger:
    """Sets up and returns the application logger.

    Log records go to the configured log file. Console output is only added
    in DEBUG mode so that log lines do not interleave with the interactive
    prompts.

    Returns:
        logging.Logger: The configured application logger.
    """
    global _logger
    if _logger:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL)

    # Prevent adding multiple handlers if called again
    if not logger.handlers:
        formatter = logging.Formatter(config.LOG_FORMAT)

        if config.DEBUG:
            ch = logging.StreamHandler(sys.stdout)
            ch.setLevel(config.LOG_LEVEL)
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        if config.LOG_FILE:
            try:
                # Ensure the log directory exists if LOG_FILE includes directories
                log_dir = os.path.dirname(config.LOG_FILE)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir)

                fh = logging.FileHandler(config.LOG_FILE, mode='a', encoding='utf-8')
                fh.setLevel(config.LOG_LEVEL)
                fh.setFormatter(formatter)
                logger.addHandler(fh)
            except (OSError, IOError) as e:
                logger.error(f"Failed to create file handler for {config.LOG_FILE}: {e}", exc_info=config.DEBUG)
                # Continue without file logging if it fails

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    _logger = logger

    if config.DEBUG:
        logger.debug("Logger initialized in DEBUG mode.")
    else:
        logger.info("Logger initialized.")

    return logger

def get_logger() -> logging.Logger:
    """Returns the singleton logger instance, setting it up if necessary."""
    if _logger is None:
        return setup_logger()
    return _logger
