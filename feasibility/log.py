"""Logging helpers for the feasibility package."""

import logging
from typing import Optional

ROOT_LOGGER_NAME = "feasibility"


def configure_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """Configure and return the package logger.

    Handlers are attached once; later calls only adjust the level, so the
    driver can raise verbosity after modules have created child loggers.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child of the package logger."""
    parent = logging.getLogger(ROOT_LOGGER_NAME)
    if not parent.handlers:
        parent = configure_logger()
    if name is None:
        return parent
    return parent.getChild(name)
