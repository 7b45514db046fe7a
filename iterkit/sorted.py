"""Lazily sorted, re-iterable view of an iterable."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["sorted_view"]

Less = Callable[[Any, Any], bool]


def _key_from_less(less: Less) -> Callable[[Any], Any]:
    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


class _SortedView(Generic[T]):
    """Sorts its source on first iteration and keeps the order afterwards."""

    def __init__(self, iterable: Iterable[T], less: Less) -> None:
        self._source = iterable
        self._less = less
        self._items: list[T] = []

    def _populate(self) -> list[T]:
        if not self._items:
            self._items = sorted(self._source, key=_key_from_less(self._less))
        return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._populate())

    def __len__(self) -> int:
        return len(self._populate())

    def __repr__(self) -> str:
        return f"sorted_view({self._source!r})"


def sorted_view(iterable: Iterable[T], less: Less = operator.lt) -> _SortedView[T]:
    """Return a view that yields the elements of ``iterable`` in sorted order.

    Ordering is given by ``less(a, b)``, defaulting to ``a < b``. Sorting is
    deferred until the view is first iterated; the result is then kept, so
    the view can be iterated again even over a one-shot source.
    """
    return _SortedView(iterable, less)