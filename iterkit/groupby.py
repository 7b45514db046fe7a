"""Grouping of consecutive elements that share a key."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["Group", "groupby"]


class _Cursor(Generic[T]):
    """Shared position in the underlying iterable, used by all groups."""

    def __init__(
        self, iterable: Iterable[T], key: Callable[[T], Any] | None
    ) -> None:
        self._iterator = iter(iterable)
        self._key = key
        self.exhausted = False
        self.current: T | None = None
        self.current_key: Any = None
        self.advance()

    def advance(self) -> None:
        if self.exhausted:
            return
        try:
            self.current = next(self._iterator)
        except StopIteration:
            self.exhausted = True
            self.current = None
            self.current_key = None
            return
        if self._key is None:
            self.current_key = self.current
        else:
            self.current_key = self._key(self.current)


class Group(Generic[T]):
    """The run of consecutive elements that share ``key``.

    A group is an iterator over the shared underlying stream. Once the
    enclosing ``groupby`` moves on, any unread elements of this group are
    skipped and the group yields nothing more.
    """

    def __init__(self, cursor: _Cursor[T], key: Hashable | Any) -> None:
        self._cursor = cursor
        self.key = key
        self._started = False
        self._completed = False

    def __iter__(self) -> Group[T]:
        return self

    def __next__(self) -> T:
        if self._completed:
            raise StopIteration
        cursor = self._cursor
        if self._started:
            cursor.advance()
            if cursor.exhausted or cursor.current_key != self.key:
                self._completed = True
                raise StopIteration
        self._started = True
        return cursor.current  # type: ignore[return-value]

    def _drain(self) -> None:
        deque(self, maxlen=0)

    def __repr__(self) -> str:
        return f"Group(key={self.key!r})"


def groupby(
    iterable: Iterable[T],
    key: Callable[[T], Any] | None = None,
) -> Iterator[tuple[Any, Group[T]]]:
    """Yield ``(key, group)`` pairs for each run of elements with equal keys.

    Without ``key`` the elements themselves are the keys. Groups may be
    read fully, partially or not at all; the next pair always starts at the
    first element of the next run.
    """
    cursor = _Cursor(iterable, key)
    while not cursor.exhausted:
        group = Group(cursor, cursor.current_key)
        yield group.key, group
        group._drain()