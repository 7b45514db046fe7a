"""Concatenation of several iterables into one stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

__all__ = ["chain", "chain_from_iterable"]


def chain(*args: Iterable[T]) -> Iterator[T]:
    """Yield every element of each argument in turn, skipping empty ones."""
    for iterable in args:
        yield from iterable


def chain_from_iterable(iterables: Iterable[Iterable[T]]) -> Iterator[T]:
    """Yield every element of each iterable produced by ``iterables``.

    The outer iterable is consumed lazily, one inner iterable at a time.
    """
    for iterable in iterables:
        yield from iterable