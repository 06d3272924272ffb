from __future__ import annotations

import logging
import sys


PACKAGE_LOGGER = "mcp_dice_notation"

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stderr handler to the package logger.

    stdout carries the MCP stdio transport, so nothing may be logged there.
    Calling this again only updates the level. Unknown level names fall back
    to INFO.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
