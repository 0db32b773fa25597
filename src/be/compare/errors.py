"""Matching raised errors against heterogeneous expectations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from be.compare.base import ComparisonResult
from be.compare.equality import equal
from be.formatting import (
    NIL,
    format_error,
    format_list,
    format_value,
    quote,
    type_name,
)


class WantKind(str, Enum):
    NIL = "nil"
    ERROR = "error"
    PATTERN = "pattern"
    TYPE = "type"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Want:
    """A single expectation for an error assertion."""

    kind: WantKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> Want:
        if value is None:
            return cls(WantKind.NIL, None)
        if isinstance(value, BaseException):
            return cls(WantKind.ERROR, value)
        if isinstance(value, str):
            return cls(WantKind.PATTERN, value)
        if isinstance(value, type):
            return cls(WantKind.TYPE, value)
        return cls(WantKind.UNSUPPORTED, value)

    def render(self) -> str:
        """Render the want as an entry of an "any of" list."""
        if self.kind is WantKind.NIL:
            return NIL
        if self.kind in (WantKind.ERROR, WantKind.PATTERN):
            return str(self.value)
        if self.kind is WantKind.TYPE:
            return type_name(self.value)
        return format_value(self.value)


def iter_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and every exception it wraps, depth first.

    Follows explicit causes, implicit contexts (unless suppressed) and the
    members of exception groups. Each exception is yielded once.
    """
    seen: set[int] = set()
    stack = [exc]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        wrapped: list[BaseException] = []
        if isinstance(current, BaseExceptionGroup):
            wrapped.extend(current.exceptions)
        if current.__cause__ is not None:
            wrapped.append(current.__cause__)
        elif current.__context__ is not None and not current.__suppress_context__:
            wrapped.append(current.__context__)
        stack.extend(reversed(wrapped))


def wraps(got: BaseException, want: BaseException) -> bool:
    return any(node is want or equal(node, want) for node in iter_chain(got))


def match_error(got: BaseException | None, want: Want) -> ComparisonResult:
    if want.kind is not WantKind.NIL and got is None:
        return ComparisonResult(matched=False, want="error", got=NIL)

    if want.kind is WantKind.NIL:
        if got is None:
            return ComparisonResult(matched=True)
        return ComparisonResult(matched=False, message=f"unexpected error: {got}")

    if want.kind is WantKind.ERROR:
        if wraps(got, want.value):
            return ComparisonResult(matched=True)
        return ComparisonResult(
            matched=False, want=format_error(want.value), got=format_error(got)
        )

    if want.kind is WantKind.PATTERN:
        text = str(got)
        if want.value in text:
            return ComparisonResult(matched=True)
        return ComparisonResult(matched=False, want=quote(want.value), got=quote(text))

    if want.kind is WantKind.TYPE:
        if type(got) is want.value:
            return ComparisonResult(matched=True)
        return ComparisonResult(
            matched=False, want=type_name(want.value), got=type_name(type(got))
        )

    return ComparisonResult(
        matched=False,
        message=f"unsupported want type: {type_name(type(want.value))}",
    )


def match_any(got: BaseException | None, *wants: Any) -> ComparisonResult:
    """Match *got* against every want, stopping at the first match.

    With one want the result carries that want's own diagnostic. With
    several, the diagnostic enumerates all of them in call order, including
    unsupported ones, which otherwise never match.
    """
    parsed = [Want.of(want) for want in wants]
    result = ComparisonResult(matched=False)
    for want in parsed:
        result = match_error(got, want)
        if result.matched:
            return result
    if len(parsed) > 1:
        return ComparisonResult(
            matched=False,
            want=f"any of the {format_list(want.render() for want in parsed)}",
            got=format_error(got),
        )
    return result
