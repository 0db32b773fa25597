"""Assertion functions used inline in tests."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from be.compare import ComparisonResult, equality, match_any
from be.formatting import NIL, format_list, format_value
from be.reporter import FatalFailure, Reporter

logger = logging.getLogger(__name__)


def _compare(got: Any, wants: tuple[Any, ...]) -> ComparisonResult:
    for want in wants:
        if equality.equal(got, want):
            return ComparisonResult(matched=True)
    if len(wants) == 1:
        rendered = format_value(wants[0])
    else:
        rendered = f"any of the {format_list(format_value(want) for want in wants)}"
    return ComparisonResult(matched=False, want=rendered, got=format_value(got))


def equal(reporter: Reporter, got: Any, *wants: Any) -> None:
    """Check that *got* equals at least one of *wants*.

    Calling it without wants is a usage error and fails the test fatally.
    """
    __tracebackhide__ = True
    if not wants:
        logger.debug("equal called without wants")
        reporter.fatal("no wants given")
        return

    result = _compare(got, wants)
    if result.matched:
        return
    message = result.describe()
    logger.debug(f"equal failed: {message}")
    reporter.error(message)


def err(reporter: Reporter, got: BaseException | None, *wants: Any) -> None:
    """Check that the error *got* matches at least one of *wants*.

    Each want is one of ``None`` (no error), an exception instance (the
    error itself or anything it wraps), a string (substring of the error
    message) or an exception class (the exact error type).

    Without wants, *got* only has to be an error. A lone ``None`` want with
    a real error is fatal.
    """
    __tracebackhide__ = True
    if not wants:
        if got is None:
            logger.debug("err failed: no error")
            reporter.error(f"want error, got {NIL}")
        return

    if len(wants) == 1 and wants[0] is None:
        if got is not None:
            logger.debug(f"err failed: unexpected {type(got).__name__}: {got}")
            reporter.fatal(f"unexpected error: {got}")
        return

    result = match_any(got, *wants)
    if result.matched:
        return
    message = result.describe()
    logger.debug(f"err failed: {message}")
    reporter.error(message)


def true(reporter: Reporter, expr: Any) -> None:
    __tracebackhide__ = True
    if not expr:
        logger.debug("true failed")
        reporter.error("not true")


@contextmanager
def raises(reporter: Reporter, *wants: Any) -> Iterator[None]:
    """Run a block and check what it raised with :func:`err`.

    ``with raises(r, KeyError): ...`` fails unless the block raises exactly
    ``KeyError``. A block that finishes normally is checked as ``None``.
    """
    __tracebackhide__ = True
    try:
        yield
    except FatalFailure:
        raise
    except Exception as exc:
        err(reporter, exc, *wants)
    else:
        err(reporter, None, *wants)
