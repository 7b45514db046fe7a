"""Selection of elements by a parallel sequence of flags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["compress"]


def compress(data: Iterable[T], selectors: Iterable[Any]) -> Iterator[T]:
    """Yield elements of ``data`` whose matching selector is truthy.

    Iteration stops as soon as either ``data`` or ``selectors`` runs out.
    """
    for element, selected in zip(data, selectors):
        if selected:
            yield element