"""Reporters receive assertion failures and decide whether a test goes on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class FatalFailure(AssertionError):
    """Raised by :class:`Recorder` to abort the current test."""


@runtime_checkable
class Reporter(Protocol):
    def error(self, message: str) -> None:
        """Record a failure and let the test continue."""
        ...

    def fatal(self, message: str) -> None:
        """Record a failure and stop the test. Must not return."""
        ...


class Recorder:
    """In-memory reporter.

    Keeps every message so callers can inspect what was reported. ``fatal``
    records the message and then raises :class:`FatalFailure`.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.failed = False
        self.aborted = False

    @property
    def message(self) -> str:
        return self.messages[-1] if self.messages else ""

    def error(self, message: str) -> None:
        self.failed = True
        self.messages.append(message)

    def fatal(self, message: str) -> None:
        self.aborted = True
        self.error(message)
        raise FatalFailure(message)


class Require:
    """Wrap a reporter so that every failure is fatal."""

    def __init__(self, reporter: Reporter) -> None:
        self.reporter = reporter

    def error(self, message: str) -> None:
        self.reporter.fatal(message)

    def fatal(self, message: str) -> None:
        self.reporter.fatal(message)


def require(reporter: Reporter) -> Require:
    return Require(reporter)
