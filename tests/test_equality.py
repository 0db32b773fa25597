"""Tests for the deep equality engine."""

import datetime
from collections import OrderedDict
from dataclasses import dataclass, field

import pytest

from be.compare.equality import equal


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a, b):
        self.a = a
        self.b = b


@dataclass
class Reading:
    value: int
    noise: float = field(default=0.0, compare=False)


class Tag(str):
    pass


class Elementwise:
    """__eq__ returns something that refuses to be a bool."""

    def __init__(self, val):
        self.val = val

    def __eq__(self, other):
        return _Ambiguous()


class _Ambiguous:
    def __bool__(self):
        raise ValueError("ambiguous truth value")


class Picky:
    def __init__(self, val):
        self.val = val

    def __eq__(self, other):
        return NotImplemented


def _func():
    pass


UTC = datetime.timezone.utc
PLUS5 = datetime.timezone(datetime.timedelta(hours=5))


@pytest.mark.parametrize(
    "got,want",
    [
        (0, 0),
        (1.5, 1.5),
        (1 + 2j, 1 + 2j),
        ("", ""),
        (b"", b""),
        (bytearray(b"ab"), bytearray(b"ab")),
        ([1, [2, [3]]], [1, [2, [3]]]),
        ({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]}),
        (frozenset({1}), frozenset({1})),
        (Point(1, 2), Point(1, 2)),
        (Point(Point(0, 0), [1]), Point(Point(0, 0), [1])),
        (Slotted(1, "x"), Slotted(1, "x")),
        (Reading(1, noise=0.1), Reading(1, noise=0.9)),
        (Tag("x"), Tag("x")),
        (ValueError("x"), ValueError("x")),
        (_func, _func),
        (datetime.date(2025, 1, 1), datetime.date(2025, 1, 1)),
        (datetime.timedelta(hours=1), datetime.timedelta(minutes=60)),
        (
            datetime.datetime(2025, 1, 1, tzinfo=UTC),
            datetime.datetime(2025, 1, 1, 5, tzinfo=PLUS5),
        ),
        (Picky(1), Picky(1)),
    ],
)
def test_equal(got, want):
    assert equal(got, want) is True


@pytest.mark.parametrize(
    "got,want",
    [
        (1, 1.0),
        (1, True),
        (0, False),
        (42, "42"),
        ("a", b"a"),
        ([1, 2], (1, 2)),
        ([1, 2], [2, 1]),
        ([1, 2], [1, 2, 3]),
        ({"a": 1}, {"a": 1.0}),
        ({"a": 1}, {"a": 1, "b": 2}),
        ({1: "a"}, {True: "a"}),
        ({1: "x"}, {1.0: "x"}),
        ({(1, 2): "x"}, {(1.0, 2): "x"}),
        ({1}, {True}),
        ({1, 2}, {1.0, 2}),
        (frozenset({0}), frozenset({False})),
        (None, []),
        ([], None),
        (None, 0),
        (Point(1, 2), Point(1, 3)),
        (Slotted(1, "x"), Slotted(1, "y")),
        (Reading(1), Reading(2)),
        (Tag("x"), Tag("y")),
        (ValueError("x"), ValueError("y")),
        (ValueError("x"), KeyError("x")),
        (_func, lambda: None),
        (object(), object()),
        (
            datetime.datetime(2025, 1, 1, tzinfo=UTC),
            datetime.datetime(2025, 1, 1, tzinfo=PLUS5),
        ),
        (
            datetime.datetime(2025, 1, 1),
            datetime.datetime(2025, 1, 1, tzinfo=UTC),
        ),
        (float("nan"), float("nan")),
    ],
)
def test_not_equal(got, want):
    assert equal(got, want) is False


def test_nan_is_not_equal_to_itself():
    nan = float("nan")
    assert equal(nan, nan) is False
    assert equal([nan], [nan]) is False


def test_identity_short_circuits():
    class Opaque:
        __slots__ = ()

    value = Opaque()
    assert equal(value, value) is True
    assert equal([value], [value]) is True


def test_non_bool_eq_falls_back_to_fields():
    assert equal(Elementwise(1), Elementwise(1)) is True
    assert equal(Elementwise(1), Elementwise(2)) is False


def test_not_implemented_eq_falls_back_to_fields():
    assert equal(Picky(1), Picky(2)) is False


def test_dict_insertion_order_is_ignored():
    got = {"x": 1, "y": 2, "z": 3}
    want = dict(reversed(list(got.items())))
    assert list(got) != list(want)
    assert equal(got, want) is True


def test_mixed_key_types_pair_by_exact_type():
    got = {1: "int", "1": "str", (1,): "tuple"}
    want = {(1,): "tuple", "1": "str", 1: "int"}
    assert equal(got, want) is True
    assert equal({1, "1", 2.5}, {2.5, "1", 1}) is True


def test_ordered_dict_keeps_its_own_order_sensitive_eq():
    assert equal(OrderedDict(a=1, b=2), OrderedDict(a=1, b=2)) is True
    assert equal(OrderedDict(a=1, b=2), OrderedDict(b=2, a=1)) is False
