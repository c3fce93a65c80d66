from dataclasses import dataclass
from typing import Optional

import pytest

from sampler.equal import equal


class MyString(str):
    pass


class Buffer:
    pass


@dataclass
class Link:
    value: str
    tail: Optional["Link"] = None


def _self_list():
    a = [None]
    a[0] = a
    return a


one, one_again, two = [1], [1], [2]
cycle_slice = _self_list()
cycle_ptr1 = _self_list()
cycle_ptr2 = _self_list()


def _noop():
    return None


@pytest.mark.parametrize(
    "x, y, want",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyString("foo"), "foo", False),
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        (cycle_slice, cycle_slice, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        (one, one, True),
        (one, two, False),
        (one, one_again, True),
        (Buffer(), Buffer(), True),
        (cycle_ptr1, cycle_ptr1, True),
        (cycle_ptr2, cycle_ptr2, True),
        (cycle_ptr1, cycle_ptr2, True),
        (None, None, True),
        (None, _noop, False),
        (_noop, lambda: None, False),
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        ([one], [one], True),
        ([one], [two], False),
        ([one_again], [one], True),
    ],
)
def test_equal(x, y, want):
    assert equal(x, y) is want


def test_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False


def test_missing_key_is_unequal():
    assert equal({"a": 1}, {"b": 1}) is False


def test_bool_and_int_differ():
    assert equal(True, 1) is False


def test_equal_cycle():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False


def test_string_subtypes_compare_by_value():
    assert equal(MyString("foo"), MyString("foo")) is True
    assert equal(MyString("foo"), MyString("bar")) is False