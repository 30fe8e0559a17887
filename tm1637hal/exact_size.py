"""A chain of two sequences that knows its remaining length at both ends."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Generic, TypeVar

__all__ = ["ExactSizeChain"]

T = TypeVar("T")


class ExactSizeChain(Iterator[T], Generic[T]):
    """Chain ``first`` and ``second``, consumable from the front or the back.

    ``len()`` always reports how many items are left.
    """

    def __init__(self, first: Iterable[T], second: Iterable[T]) -> None:
        self._items: deque[T] = deque(chain(first, second))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> ExactSizeChain[T]:
        return self

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def next_back(self) -> T:
        """Take the last remaining item; raise ``StopIteration`` when empty."""
        if not self._items:
            raise StopIteration
        return self._items.pop()