"""pytest plugin providing the ``be_reporter`` fixture."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from be.config import BeConfig, load_config
from be.reporter import Reporter, Require
from be.verbose import setup_logger, teardown_logger

logger = logging.getLogger(__name__)


class PytestReporter:
    """Reporter bound to one test item.

    Non-fatal failures are collected and turned into a test failure once
    the test body has run, so every failing check in a test is reported.
    Fatal failures stop the test through ``pytest.fail``.
    """

    def __init__(self, nodeid: str) -> None:
        self.nodeid = nodeid
        self.failures: list[str] = []

    def error(self, message: str) -> None:
        logger.info(f"{self.nodeid}: {message}")
        self.failures.append(message)

    def fatal(self, message: str) -> None:
        __tracebackhide__ = True
        logger.info(f"{self.nodeid}: {message} (fatal)")
        pytest.fail(message, pytrace=False)


_CONFIG_KEY = pytest.StashKey[BeConfig]()
_REPORTER_KEY = pytest.StashKey[PytestReporter]()
_LOGGING_KEY = pytest.StashKey[bool]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("be", "inline assertions")
    group.addoption(
        "--be-config",
        default=None,
        help="Path to a be YAML config",
    )
    group.addoption(
        "--be-require",
        action="store_true",
        default=False,
        help="Treat every be failure as fatal",
    )
    parser.addini("be_config", "Path to a be YAML config, relative to rootdir")


def _load(config: pytest.Config) -> BeConfig:
    option = config.getoption("be_config")
    if option:
        path = Path(option)
    elif config.getini("be_config"):
        path = config.rootpath / config.getini("be_config")
    else:
        return BeConfig()

    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise pytest.UsageError(f"invalid be config {path}: {e}") from e


def pytest_configure(config: pytest.Config) -> None:
    be_config = _load(config)
    if config.getoption("be_require"):
        be_config.require = True
    if be_config.log_file or be_config.verbose:
        setup_logger(be_config)
        config.stash[_LOGGING_KEY] = True
    config.stash[_CONFIG_KEY] = be_config


def pytest_unconfigure(config: pytest.Config) -> None:
    if config.stash.get(_LOGGING_KEY, False):
        teardown_logger()
        del config.stash[_LOGGING_KEY]


@pytest.fixture
def be_reporter(request: pytest.FixtureRequest) -> Reporter:
    """Reporter for the current test."""
    reporter = PytestReporter(request.node.nodeid)
    request.node.stash[_REPORTER_KEY] = reporter
    be_config = request.config.stash.get(_CONFIG_KEY, BeConfig())
    if be_config.require:
        return Require(reporter)
    return reporter


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    outcome = yield
    report = outcome.get_result()
    reporter = item.stash.get(_REPORTER_KEY, None)
    if reporter is None or report.when != "call" or not reporter.failures:
        return

    text = "\n".join(reporter.failures)
    if report.passed:
        report.outcome = "failed"
        report.longrepr = text
    else:
        report.sections.append(("be failures", text))
