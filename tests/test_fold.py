from __future__ import annotations

import pytest

from kaguya import foldl, foldr, sum, sum_of, sum_range


def test_foldl() -> None:
    assert foldl(4, lambda x, y: x * y, [1, 2, 3]) == 24
    assert foldl(6, lambda x, y: x - y, [1, 2, 3]) == 0


def test_foldl_is_left_to_right() -> None:
    assert foldl("", lambda acc, x: acc + x, ["a", "b", "c"]) == "abc"


def test_foldr() -> None:
    v = ["Houraisan", "Kaguya"]
    assert foldr("", lambda x, y: x + "<|>" + y, v) == "<|>Kaguya<|>Houraisan"


def test_foldr_is_right_to_left_with_accumulator_first() -> None:
    steps: list[tuple[str, str]] = []

    def record(acc: str, item: str) -> str:
        steps.append((acc, item))
        return acc + item

    assert foldr("", record, ["a", "b", "c"]) == "cba"
    assert steps == [("", "c"), ("c", "b"), ("cb", "a")]


@pytest.mark.parametrize("fold", [foldl, foldr])
def test_fold_of_empty_returns_init(fold) -> None:
    marker = object()
    assert fold(marker, lambda acc, x: x, []) is marker
    assert fold(0, lambda acc, x: acc + x, iter([])) == 0


def test_fold_accepts_generators() -> None:
    assert foldr([], lambda acc, x: acc + [x], (i for i in range(3))) == [2, 1, 0]


def test_sum_forms_agree() -> None:
    assert sum(range(1, 5)) == 10
    assert sum([1, 2, 3, 4]) == 10
    assert sum_range(1, 4) == 10
    assert sum_of(1, 2, 3, 4) == 10


def test_sum_edge_cases() -> None:
    assert sum([]) == 0
    assert sum_of() == 0
    assert sum_range(5, 4) == 0
    assert sum_range(3, 3) == 3
    assert sum([0.5, 0.25]) == 0.75


def test_fold_callback_exception_propagates() -> None:
    def boom(acc: int, x: int) -> int:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        foldl(0, boom, [1])
