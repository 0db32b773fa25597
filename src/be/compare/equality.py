"""Deep, type-strict equality between arbitrary values."""

from __future__ import annotations

import datetime
from typing import Any

_SCALARS = (int, float, complex, bool, str, bytes, bytearray)
_TIMES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


def _defines_eq(tp: type) -> bool:
    """Return True if a non-builtin class in *tp*'s MRO defines ``__eq__``."""
    for klass in tp.__mro__:
        if "__eq__" in vars(klass):
            return klass.__module__ != "builtins"
    return False


def _truth(result: Any) -> bool | None:
    if result is NotImplemented:
        return None
    try:
        return bool(result)
    except (TypeError, ValueError):
        # e.g. element-wise comparison results
        return None


def _custom_equal(got: Any, want: Any) -> bool | None:
    tp = type(got)
    if not _defines_eq(tp):
        return None
    return _truth(tp.__eq__(got, want))


def _fields(value: Any) -> dict[str, Any] | None:
    tp = type(value)
    is_error = isinstance(value, BaseException)
    if tp.__module__ == "builtins" and not is_error:
        return None
    has_dict = hasattr(value, "__dict__")
    fields = dict(vars(value)) if has_dict else {}
    has_slots = False
    for klass in tp.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            has_slots = True
            if hasattr(value, name):
                fields[name] = getattr(value, name)
    if not has_dict and not has_slots:
        return None
    if is_error:
        fields["args"] = value.args
    return fields


def _equal_sequences(got: list | tuple, want: list | tuple) -> bool:
    if len(got) != len(want):
        return False
    return all(equal(g, w) for g, w in zip(got, want))


def _pair_keys(got, want) -> list[tuple[Any, Any]] | None:
    """Pair every element of *got* with a distinct, engine-equal element of *want*.

    Hash lookup would treat ``1``, ``1.0`` and ``True`` as the same key, so
    keys are paired by the engine instead. Returns None when some element
    has no partner.
    """
    if len(got) != len(want):
        return None
    unmatched = list(want)
    pairs = []
    for key in got:
        for i, candidate in enumerate(unmatched):
            if equal(key, candidate):
                pairs.append((key, unmatched.pop(i)))
                break
        else:
            return None
    return pairs


def _equal_mappings(got: dict, want: dict) -> bool:
    pairs = _pair_keys(got, want)
    if pairs is None:
        return False
    return all(equal(got[g], want[w]) for g, w in pairs)


def equal(got: Any, want: Any) -> bool:
    """Report whether *got* and *want* are equal.

    Values of different concrete types are never equal, so ``1``, ``1.0``
    and ``True`` are three distinct values. Aware datetimes compare by
    instant regardless of offset. A user-defined ``__eq__`` wins over
    structural comparison; otherwise sequences compare in order, mappings
    by key and objects field by field.

    Cyclic structures recurse without bound.
    """
    if got is None or want is None:
        return got is want
    tp = type(got)
    if tp is not type(want):
        return False
    if tp in _SCALARS or tp in _TIMES:
        return got == want
    if got is want:
        return True

    custom = _custom_equal(got, want)
    if custom is not None:
        return custom

    if isinstance(got, _SCALARS + _TIMES):
        return got == want
    if isinstance(got, (list, tuple)):
        return _equal_sequences(got, want)
    if isinstance(got, dict):
        return _equal_mappings(got, want)
    if isinstance(got, (set, frozenset)):
        return _pair_keys(got, want) is not None

    got_fields = _fields(got)
    if got_fields is not None:
        return _equal_mappings(got_fields, _fields(want))

    return _truth(got == want) is True
