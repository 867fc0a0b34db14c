"""Logging configuration for the careers backend."""

import logging
import sys

LOGGER_NAME = "careers_ai"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Configure and return the application logger.

    Only the first call installs a handler; later calls just adjust the level.
    Unknown level names fall back to INFO.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(log_level)

    if not _configured:
        logger.handlers.clear()
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    else:
        for handler in logger.handlers:
            handler.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the application logger, e.g. careers_ai.server"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _configured = False
