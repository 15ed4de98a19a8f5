"""Logging configuration for taskboard_svc."""

import logging
import sys

LOGGER_NAME = "taskboard_svc"


def setup_logging(level: str = "INFO") -> None:
    """Configure the taskboard_svc logger with a timestamped stderr handler.

    Safe to call more than once; the handler is only attached the first time.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Unknown names fall back to INFO.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if any(getattr(handler, "_taskboard_handler", False) for handler in logger.handlers):
        return

    # Detailed format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler._taskboard_handler = True
    logger.addHandler(handler)
