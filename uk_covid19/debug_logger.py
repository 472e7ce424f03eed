"""
Debug Logging Utility
Optional console logging for troubleshooting queries and requests.
"""

import logging
import sys

PACKAGE_LOGGER = "uk_covid19"

LOG_FORMAT = '[%(levelname)s][%(name)s] %(message)s'


def configure_debug_logging(enable_debug: bool = False) -> logging.Logger:
    """
    Configure the package logger

    With debugging enabled a single stderr handler is attached at DEBUG level.
    Calling again replaces that handler rather than adding another one.

    Args:
        enable_debug: Whether to enable debug logging

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_uk_covid19_debug_handler", False):
            logger.removeHandler(handler)

    if not enable_debug:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._uk_covid19_debug_handler = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    return logger
