import itertools
import operator
from dataclasses import dataclass

import pytest

from iterkit.accumulate import accumulate


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


def test_simple_sum():
    assert list(accumulate([1, 2, 3, 4, 5])) == [1, 3, 6, 10, 15]


def test_explicit_plus_matches_default():
    assert list(accumulate([1, 2, 3, 4, 5], operator.add)) == [1, 3, 6, 10, 15]


def test_with_subtraction_lambda():
    result = list(accumulate([5, 4, 3, 2, 1], lambda a, b: a - b))
    assert result == [5, 1, -2, -4, -5]


def test_handles_unbound_method():
    ps = [Point(1, 2), Point(10, 50), Point(300, 600)]
    result = list(accumulate(ps, Point.add))
    assert result == [Point(1, 2), Point(11, 52), Point(311, 652)]


@pytest.mark.parametrize("source", [[1, 2, 3, 4, 5], (1, 2, 3, 4, 5), range(1, 6)])
def test_various_iterables(source):
    assert list(accumulate(source)) == [1, 3, 6, 10, 15]


def test_empty_yields_nothing():
    assert list(accumulate([])) == []


def test_second_element_is_sum_of_first_two():
    it = accumulate([2, 3])
    next(it)
    assert next(it) == 5


def test_first_value_is_first_element():
    it = accumulate([7, 3])
    assert next(it) == 7


def test_exhausts_after_last():
    it = accumulate([1])
    assert next(it) == 1
    with pytest.raises(StopIteration):
        next(it)


def test_strings_concatenate():
    assert list(accumulate("abc")) == ["a", "ab", "abc"]


def test_lazy_on_infinite_input():
    result = list(itertools.islice(accumulate(itertools.count(1)), 4))
    assert result == [1, 3, 6, 10]


def test_func_not_called_for_single_element():
    calls = []

    def record(a, b):
        calls.append((a, b))
        return a + b

    assert list(accumulate([42], record)) == [42]
    assert calls == []