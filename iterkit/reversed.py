"""Re-iterable reversed view of a sequence."""

from __future__ import annotations

from collections.abc import Iterator, Reversible
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["reversed_view"]


class _ReversedView(Generic[T]):
    """A live view that iterates its sequence back to front."""

    def __init__(self, sequence: Reversible[T]) -> None:
        reversed(sequence)  # fail early on objects that cannot be reversed
        self._sequence = sequence

    def __iter__(self) -> Iterator[T]:
        return reversed(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"reversed_view({self._sequence!r})"


def reversed_view(sequence: Reversible[T]) -> _ReversedView[T]:
    """Return a view that iterates ``sequence`` from its last element.

    The view can be iterated repeatedly and reflects later changes to the
    sequence. Raises TypeError if the object cannot be reversed.
    """
    return _ReversedView(sequence)