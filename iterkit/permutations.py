"""Lexicographic permutations of the elements of an iterable."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["next_permutation", "permutations"]

Less = Callable[[Any, Any], bool]


def next_permutation(items: MutableSequence[T], less: Less = operator.lt) -> bool:
    """Rearrange ``items`` in place into the next greater permutation.

    Returns True if such a permutation exists. Otherwise ``items`` is
    rearranged into its smallest permutation (sorted order) and False is
    returned.
    """
    size = len(items)
    if size < 2:
        return False
    pivot = next(
        (i for i in range(size - 2, -1, -1) if less(items[i], items[i + 1])),
        None,
    )
    if pivot is None:
        items.reverse()
        return False
    successor = next(
        j for j in range(size - 1, pivot, -1) if less(items[pivot], items[j])
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = items[pivot + 1 :][::-1]
    return True


def permutations(iterable: Iterable[T]) -> Iterator[tuple[T, ...]]:
    """Yield every distinct ordering of the elements in lexicographic order.

    Elements are first sorted with ``<``; equal elements produce no
    duplicate permutations. An empty iterable yields nothing.
    """
    working = sorted(iterable)
    if not working:
        return
    while True:
        yield tuple(working)
        if not next_permutation(working):
            return