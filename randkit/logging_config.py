"""
randkit loggers.

The library only creates ``randkit.*`` loggers and never attaches
output handlers; the host application decides where records go. A
NullHandler on the package logger keeps Python's last-resort handler
from printing them when the host configured nothing.

Usage:
    from randkit.logging_config import get_logger
    logger = get_logger("packer")
    logger.debug("packed %d tokens", 3)
"""

import logging


ROOT_LOGGER_NAME = "randkit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger

    Args:
        name: module name (e.g. "packer", "selector")

    Returns:
        randkit.{name} logger
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
