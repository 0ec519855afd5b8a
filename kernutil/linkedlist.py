"""Ordered collections of distinct items: a plain list and a sorted list.

Items are compared with ``==``. An item may appear in a list only once.
"""

from __future__ import annotations

import bisect
import functools
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


class List(Generic[T]):
    """A sequence of distinct items with cheap access to its front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return self.is_in_list(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _reject_duplicate(self, item: T) -> None:
        if self.is_in_list(item):
            raise ValueError(f"{item!r} is already in the list")

    def prepend(self, item: T) -> None:
        """Put ``item`` at the front of the list."""
        self._reject_duplicate(item)
        self._items.insert(0, item)

    def append(self, item: T) -> None:
        """Put ``item`` at the end of the list."""
        self._reject_duplicate(item)
        self._items.append(item)

    def front(self) -> T:
        """Return the first item without removing it."""
        if not self._items:
            raise IndexError("front of an empty list")
        return self._items[0]

    def remove_front(self) -> T:
        """Remove and return the first item."""
        if not self._items:
            raise IndexError("remove from an empty list")
        return self._items.pop(0)

    def remove(self, item: T) -> None:
        """Remove ``item``, which must be in the list."""
        try:
            self._items.remove(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the list") from None

    def is_in_list(self, item: object) -> bool:
        """Return True if ``item`` is in the list."""
        return any(item == present for present in self._items)

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return not self._items

    def apply(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in list(self._items):
            func(item)

    def sanity_check(self) -> None:
        """Raise AssertionError if the list has been corrupted."""
        for index, item in enumerate(self._items):
            _check(
                not any(item == other for other in self._items[index + 1 :]),
                f"{item!r} appears more than once",
            )

    def self_test(self, items: Iterable[T]) -> None:
        """Exercise the list with ``items``; the list must start empty."""
        entries = list(items)
        self.sanity_check()
        _check(self.is_empty(), "list must start empty")
        for _ in self:
            raise AssertionError("iteration over an empty list yielded an item")

        for item in entries:
            self.append(item)
            _check(self.is_in_list(item), f"{item!r} missing after append")
            _check(not self.is_empty(), "list empty after append")
        self.sanity_check()

        for item in entries:
            self.remove(item)
            _check(not self.is_in_list(item), f"{item!r} present after remove")
        _check(self.is_empty(), "list must be empty after removing everything")
        self.sanity_check()


class SortedList(List[T]):
    """A list kept in increasing order by a three-way ``compare`` function.

    ``compare(x, y)`` returns a negative number if x < y, zero if they are
    equal and a positive number if x > y. Items that compare equal keep the
    order in which they were inserted.
    """

    def __init__(self, compare: Callable[[T, T], int], items: Iterable[T] = ()) -> None:
        self.compare = compare
        self._key = functools.cmp_to_key(compare)
        super().__init__(items)

    def insert(self, item: T) -> None:
        """Insert ``item`` after every item not greater than it."""
        self._reject_duplicate(item)
        position = bisect.bisect_right(self._items, self._key(item), key=self._key)
        self._items.insert(position, item)

    def prepend(self, item: T) -> None:
        """Insert ``item`` in sorted position; a sorted list has no front-insert."""
        self.insert(item)

    def append(self, item: T) -> None:
        """Insert ``item`` in sorted position; a sorted list has no end-insert."""
        self.insert(item)

    def sanity_check(self) -> None:
        """Raise AssertionError if the list is corrupted or out of order."""
        super().sanity_check()
        for prev, item in zip(self._items, self._items[1:]):
            _check(self.compare(prev, item) <= 0, f"{prev!r} sorted before {item!r}")

    def self_test(self, items: Iterable[T]) -> None:
        """Exercise the sorted list with ``items``; the list must start empty."""
        entries = list(items)
        super().self_test(entries)

        for item in entries:
            self.insert(item)
            _check(self.is_in_list(item), f"{item!r} missing after insert")
        self.sanity_check()

        removed = []
        while not self.is_empty():
            item = self.remove_front()
            _check(not self.is_in_list(item), f"{item!r} present after removal")
            removed.append(item)
        _check(len(removed) == len(entries), "not everything came back out")

        for prev, item in zip(removed, removed[1:]):
            _check(self.compare(prev, item) <= 0, "items came out of order")
        self.sanity_check()