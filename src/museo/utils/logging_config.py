"""Structured logger setup shared across the package."""

import logging

from pythonjsonlogger.json import JsonFormatter

from museo.config.settings import Settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level is read from MUSEO_LOG_LEVEL when the logger is first built.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(Settings.log_level_from_environment())
    logger.propagate = False
    return logger
