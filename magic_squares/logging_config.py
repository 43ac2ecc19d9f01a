"""Logger setup for the magic-squares command line."""
import logging
import sys
from typing import Optional

LOGGER_NAME = "magic_squares"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Route the package's sweep and export messages to stderr.

    Squares and sweep tables go to stdout, so log lines never interleave
    with them. ``log_file`` adds a second copy, truncated on every run.
    Calling this again replaces the handlers of the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)
    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
