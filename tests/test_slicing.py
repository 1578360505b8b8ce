from __future__ import annotations

import itertools

import pytest

from kaguya import skip, take


def test_skip() -> None:
    assert list(skip(1, [])) == []
    assert list(skip(1, [1, 2, 3])) == [2, 3]
    assert list(skip(5, [1, 2, 3])) == []
    assert list(skip(0, [1, 2, 3])) == [1, 2, 3]


def test_take() -> None:
    assert list(take(2, [])) == []
    assert list(take(2, [1, 2, 3])) == [1, 2]
    assert list(take(5, [1, 2, 3])) == [1, 2, 3]
    assert list(take(0, [1, 2, 3])) == []


def test_skip_and_take_on_infinite_source() -> None:
    assert list(take(3, skip(2, itertools.count()))) == [2, 3, 4]


def test_take_stops_pulling_after_n() -> None:
    source = iter([1, 2, 3, 4])
    assert list(take(2, source)) == [1, 2]
    assert next(source) == 3


def test_skip_keeps_none_items() -> None:
    assert list(skip(1, [None, None, 1])) == [None, 1]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_take_then_skip_partitions(n: int) -> None:
    s = [4, 8, 15, 16, 23, 42][:5]
    prefix = list(take(n, s))
    suffix = list(skip(n, s))
    assert len(prefix) == min(n, len(s))
    assert prefix + suffix == s


@pytest.mark.parametrize("combinator", [skip, take])
def test_negative_count_rejected_eagerly(combinator) -> None:
    with pytest.raises(ValueError):
        combinator(-1, [1, 2])


@pytest.mark.parametrize("combinator", [skip, take])
@pytest.mark.parametrize("n", [1.5, "2", None])
def test_non_integer_count_rejected_eagerly(combinator, n) -> None:
    with pytest.raises(TypeError):
        combinator(n, itertools.count())


def test_fractional_take_cannot_run_past_the_source_bound() -> None:
    with pytest.raises(TypeError):
        take(1.5, itertools.count())
    with pytest.raises(TypeError):
        skip(1.5, [1, 2, 3])
