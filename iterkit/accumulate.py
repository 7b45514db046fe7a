"""Running accumulation over an iterable."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

__all__ = ["accumulate"]


def accumulate(
    iterable: Iterable[T],
    func: Callable[[T, T], T] = operator.add,
) -> Iterator[T]:
    """Yield the first element, then each result of folding the next element in.

    ``func`` is called as ``func(accumulated, element)`` and defaults to
    addition. An empty iterable yields nothing.
    """
    iterator = iter(iterable)
    try:
        total = next(iterator)
    except StopIteration:
        return
    yield total
    for element in iterator:
        total = func(total, element)
        yield total