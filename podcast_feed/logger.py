"""Logging configuration for podcast feed loading."""

import logging
import sys


def setup_logger(name="podcast-feed", level=logging.INFO):
    """Set up logger with clean formatting."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Only adjust levels when the handler is already installed
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    # stderr, stdout carries the CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    # [LEVEL] message
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


# Default logger instance
logger = setup_logger()
