from __future__ import annotations

import itertools

import pytest
from kungfu import Nothing, Some

from kaguya import head, init, last, tail


def test_head() -> None:
    assert isinstance(head([]), Nothing)
    assert isinstance(head([1, 2, 3]), Some)
    assert head([1, 2, 3]).unwrap() == 1


def test_head_of_infinite_source() -> None:
    assert head(itertools.count(7)).unwrap() == 7


def test_head_keeps_none_items() -> None:
    found = head([None])
    assert isinstance(found, Some)
    assert found.unwrap() is None


def test_tail() -> None:
    assert isinstance(tail([]), Nothing)
    assert tail([1, 2, 3]).unwrap() == [2, 3]
    assert tail([1]).unwrap() == []


def test_last() -> None:
    assert isinstance(last([]), Nothing)
    assert last([1, 2, 3]).unwrap() == 3
    assert last(iter([None])).unwrap() is None


def test_init() -> None:
    assert isinstance(init([]), Nothing)
    assert init([1, 2, 3]).unwrap() == [1, 2]
    assert init([1]).unwrap() == []


@pytest.mark.parametrize("s", [[], [1], [1, 2], [3, 1, 4, 1, 5]])
def test_accessor_shapes(s: list[int]) -> None:
    for accessor in (head, tail, init, last):
        assert isinstance(accessor(s), Nothing) == (len(s) == 0)
    if s:
        assert head(s).unwrap() == s[0]
        assert last(s).unwrap() == s[-1]
        assert tail(s).unwrap() == s[1:]
        assert init(s).unwrap() == s[:-1]


def test_accessors_accept_iterators() -> None:
    assert tail(iter("abc")).unwrap() == ["b", "c"]
    assert init(x for x in "abc").unwrap() == ["a", "b"]
