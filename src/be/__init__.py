"""Inline test assertions: ``be.equal``, ``be.err``, ``be.true``."""

from be.checks import equal, err, raises, true
from be.reporter import FatalFailure, Recorder, Reporter, Require, require

__all__ = [
    "FatalFailure",
    "Recorder",
    "Reporter",
    "Require",
    "equal",
    "err",
    "raises",
    "require",
    "true",
]
