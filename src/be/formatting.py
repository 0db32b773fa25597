"""Stable text rendering of arbitrary values for failure diagnostics."""

from __future__ import annotations

import json
from typing import Any, Iterable

NIL = "<nil>"


def type_name(tp: type) -> str:
    """Return ``Qualname`` for builtins and ``module.Qualname`` otherwise."""
    if tp.__module__ == "builtins":
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


def quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_error(exc: BaseException | None) -> str:
    if exc is None:
        return NIL
    return f"{type_name(type(exc))}({exc})"


def format_list(items: Iterable[str]) -> str:
    return "[" + " ".join(items) + "]"


def _format_bytes(value: bytes | bytearray) -> str:
    pairs = ", ".join(f"0x{b:02x}" for b in value)
    return f"{type(value).__name__}([{pairs}])"


def _format_set(value: set | frozenset) -> str:
    items = sorted(format_value(item) for item in value)
    if type(value) is frozenset:
        return "frozenset({" + ", ".join(items) + "})" if items else "frozenset()"
    return "{" + ", ".join(items) + "}" if items else "set()"


def _object_fields(value: Any) -> dict[str, Any]:
    fields = dict(getattr(value, "__dict__", {}))
    for klass in type(value).__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in fields:
                continue
            if hasattr(value, name):
                fields[name] = getattr(value, name)
    return fields


def _format_object(value: Any) -> str:
    fields = ", ".join(
        f"{name}={format_value(field)}" for name, field in _object_fields(value).items()
    )
    return f"{type_name(type(value))}({fields})"


def format_value(value: Any) -> str:
    """Render *value* the same way on every run.

    Strings are double-quoted, bytes become hex pairs, containers are
    rendered recursively and sets are sorted so hash order never leaks into
    a message. User-defined objects that keep the default ``object.__repr__``
    (which embeds a memory address) are rendered field by field.
    """
    if value is None:
        return NIL
    tp = type(value)
    if tp is str:
        return quote(value)
    if tp in (bytes, bytearray):
        return _format_bytes(value)
    if tp is list:
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if tp is tuple:
        if len(value) == 1:
            return f"({format_value(value[0])},)"
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if tp is dict:
        items = (f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    if tp in (set, frozenset):
        return _format_set(value)
    if isinstance(value, BaseException):
        return format_error(value)
    if isinstance(value, type):
        return type_name(value)
    if tp.__module__ != "builtins" and tp.__repr__ is object.__repr__:
        return _format_object(value)
    return repr(value)
