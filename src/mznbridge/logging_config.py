"""
Logging setup for the mznbridge command line and demos.

Log records go to stderr so that generated MiniZinc text and solve
results on stdout stay clean.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "mznbridge"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Args:
        level: Logging level for the package logger and its handlers
        log_file: Optional path; records are also written there

    Returns:
        The configured "mznbridge" logger

    Calling this again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
