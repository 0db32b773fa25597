"""Pytest configuration and fixtures."""

import logging

import pytest

from be import Recorder

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from be loggers after each test so log files don't leak."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name == "be" or name.startswith("be.")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def r():
    """Fresh in-memory reporter."""
    return Recorder()
