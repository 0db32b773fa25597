"""Routing of assertion failure logs to the places a config asks for."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from be.config import BeConfig

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def teardown_logger(logger_name: str = "be") -> logging.Logger:
    """Detach and close every handler on the logger and reset its level."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return logger


def setup_logger(config: BeConfig, logger_name: str = "be") -> logging.Logger:
    """
    Point the ``be`` logger at the outputs *config* selects.

    Failures are appended to ``config.log_file`` when it is set and echoed to
    stderr when ``config.verbose`` is on. Handlers from an earlier call are
    closed first. With neither output selected the logger is left without
    handlers.

    Args:
        config: Loaded config; ``log_file`` is expected to be resolved already
        logger_name: Logger to configure; ``be`` covers every module logger

    Returns:
        The configured logger.
    """
    logger = teardown_logger(logger_name)

    handlers: list[logging.Handler] = []
    if config.log_file:
        path = Path(config.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="a", encoding="utf-8"))
    if config.verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    return logger
