"""Cartesian product of several iterables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["product"]


def _odometer(pools: list[tuple[Any, ...]]) -> Iterator[tuple[Any, ...]]:
    if any(not pool for pool in pools):
        return
    indices = [0] * len(pools)
    while True:
        yield tuple(pool[index] for pool, index in zip(pools, indices))
        for position in reversed(range(len(pools))):
            indices[position] += 1
            if indices[position] < len(pools[position]):
                break
            indices[position] = 0
        else:
            return


def product(*args: Iterable[Any], repeat: int = 1) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of the Cartesian product of the arguments.

    The rightmost position varies fastest. With ``repeat`` the arguments are
    taken that many times over. With no iterables at all a single empty
    tuple is produced; if any iterable is empty nothing is produced.
    Raises ValueError for a negative ``repeat``.
    """
    if not isinstance(repeat, int) or isinstance(repeat, bool):
        raise TypeError("repeat must be an integer")
    if repeat < 0:
        raise ValueError("repeat must not be negative")
    pools = [tuple(iterable) for iterable in args] * repeat
    return _odometer(pools)