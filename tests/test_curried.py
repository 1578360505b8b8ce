from __future__ import annotations

import itertools

import pytest

from kaguya import curried as C
from kaguya import pipe


def test_curried_map() -> None:
    inc = C.map(lambda x: x + 1)
    assert list(inc([1, 2, 3])) == [2, 3, 4]
    assert list(inc((10,))) == [11]


def test_curried_filter_and_filter_not() -> None:
    evens = C.filter(lambda x: x & 1 == 0)
    odds = C.filter_not(lambda x: x & 1 == 0)
    assert list(evens([1, 2, 3])) == [2]
    assert list(odds([1, 2, 3])) == [1, 3]


def test_curried_skip_and_take() -> None:
    skip_one = C.skip(1)
    take_two = C.take(2)
    assert list(skip_one([])) == []
    assert list(skip_one([1, 2, 3])) == [2, 3]
    assert list(take_two([])) == []
    assert list(take_two([1, 2, 3])) == [1, 2]


def test_curried_tap() -> None:
    seen: list[int] = []
    assert list(C.tap(seen.append)([1, 2])) == [1, 2]
    assert seen == [1, 2]


def test_curried_foldl_shapes() -> None:
    v = [1, 2, 3]
    assert C.foldl(5)(lambda x, y: x * y, v) == 30
    assert C.foldl(6, lambda x, y: x - y)(v) == 0
    assert C.foldl_step(0)(lambda x, y: x + y)(v) == 6


def test_curried_foldr_shapes() -> None:
    v = ["Houraisan", "Kaguya"]
    assert C.foldr("This is:")(lambda x, y: x + " " + y, v) == "This is: Kaguya Houraisan"
    assert C.foldr("すごい！", lambda x, y: x + " " + y)(v) == "すごい！ Kaguya Houraisan"
    assert C.foldr_step("楽しい〜")(lambda x, y: x + " " + y)(v) == "楽しい〜 Kaguya Houraisan"


def test_curried_folds_are_reusable() -> None:
    total = C.foldl(0, lambda x, y: x + y)
    assert total([1, 2]) == 3
    assert total([10, 20]) == 30


def test_curried_forms_compose() -> None:
    first_even_squares = pipe(
        C.filter(lambda x: x % 2 == 0),
        C.map(lambda x: x * x),
        C.take(3),
        list,
    )
    assert first_even_squares(itertools.count(1)) == [4, 16, 36]


def test_curried_validation_is_eager() -> None:
    with pytest.raises(TypeError):
        C.map(1)
    with pytest.raises(ValueError):
        C.take(-1)
    with pytest.raises(TypeError):
        C.foldl(0, "not callable")
    with pytest.raises(TypeError):
        C.foldr_step(0)(None)


def test_curried_slicing_rejects_non_integer_counts() -> None:
    with pytest.raises(TypeError):
        C.take(1.5)
    with pytest.raises(TypeError):
        C.skip(0.5)
